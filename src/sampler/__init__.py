"""Extract and render code samples from source files."""
