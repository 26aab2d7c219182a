"""Default settings. CLI options (and their environment variables) override these."""

DEFAULT_BASE_CLASS = "AzureDevOpsTask"

DEFAULT_TIMEOUT = 30.0

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

# First YAML code block in the article body; plain <pre><code> as a fallback.
SNIPPET_SELECTOR = "div.content code.lang-yaml, div.content pre code"
