"""Pipeline stages: tokenize, theme and render."""
