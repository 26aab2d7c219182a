"""Generate Sharpliner C# task models from Azure Pipelines task documentation."""

__version__ = "0.1.0"
