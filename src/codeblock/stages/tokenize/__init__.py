"""Tokenize stage – grammar-driven lexing into classified lines.

Public API
----------
- tokenize(source, language="bash") -> list[StyledLine]
- tokenize_document(document, language) -> list[StyledLine]
- classify(ttype) -> TokenClass
- supported_languages() -> list[str]
"""

from codeblock.lang import supported_languages  # noqa: F401
from codeblock.stages.tokenize.tokenizer import (  # noqa: F401
    classify,
    tokenize,
    tokenize_document,
)
