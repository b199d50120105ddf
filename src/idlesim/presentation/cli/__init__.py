"""Command-line batch runner."""
