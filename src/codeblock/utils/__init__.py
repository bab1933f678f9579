"""Small helpers shared across codeblock modules."""
