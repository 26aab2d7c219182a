from pathlib import Path

from sharpliner_task_codegen.parser.detect import detect_source
from sharpliner_task_codegen.parser.snippet import locate_snippet

FIXTURES = Path(__file__).parent / "fixtures"


class TestDetectSource:
    def test_detect_url(self):
        assert detect_source("https://learn.microsoft.com/azure/devops/pipelines/tasks/reference/npm-v1") == "url"
        assert detect_source("http://localhost/task") == "url"

    def test_detect_html_page(self):
        assert detect_source(str(FIXTURES / "dotnet-task.html")) == "html"

    def test_detect_snippet(self):
        assert detect_source(str(FIXTURES / "dotnet-snippet.yml")) == "snippet"

    def test_detect_snippet_that_is_not_valid_yaml(self, tmp_path):
        f = tmp_path / "copy-files.yml"
        f.write_text(
            "# Copy files v2\n"
            "# Copy files from a source folder to a target folder.\n"
            "- task: CopyFiles@2\n"
            "  inputs:\n"
            "    Contents: **/*.csproj # string. Required. Contents. Default: **/*.csproj.\n",
            encoding="utf-8",
        )
        assert detect_source(str(f)) == "snippet"

    def test_unknown_text_defaults_to_html(self, tmp_path):
        f = tmp_path / "notes.txt"
        f.write_text("just: [some, text")
        assert detect_source(str(f)) == "html"


class TestLocateSnippet:
    def test_finds_yaml_block_inside_content(self):
        html = (FIXTURES / "dotnet-task.html").read_text(encoding="utf-8")
        snippet = locate_snippet(html)
        lines = snippet.splitlines()
        assert lines[0] == "# .NET Core v2"
        assert lines[2] == "- task: DotNetCoreCLI@2"
        assert "not the snippet" not in snippet

    def test_falls_back_to_plain_code_block(self):
        html = '<div class="content"><pre><code>- task: Foo@1</code></pre></div>'
        assert locate_snippet(html) == "- task: Foo@1"

    def test_first_block_in_document_order(self):
        html = (
            '<div class="content">'
            "<pre><code>first</code></pre>"
            '<pre><code class="lang-yaml">second</code></pre>'
            "</div>"
        )
        assert locate_snippet(html) == "first"

    def test_missing_block_returns_empty(self):
        assert locate_snippet("<html><body><p>No code here</p></body></html>") == ""

    def test_text_of_highlighted_spans_is_joined(self):
        html = '<div class="content"><code class="lang-yaml"><span>- task:</span> <span>Foo@1</span></code></div>'
        assert locate_snippet(html) == "- task: Foo@1"

    def test_custom_selector(self):
        html = '<article><code class="yaml">x</code></article>'
        assert locate_snippet(html, selector="article code.yaml") == "x"
