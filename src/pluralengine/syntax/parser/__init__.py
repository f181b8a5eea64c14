"""Plural rules parser module.

Module Organization:
- core.py: Main PluralRulesParser class
- primitives.py: Basic parsers (words, integers, sample literals)
- rules.py: Tokenizer and condition grammar
- samples.py: @integer / @decimal sample clause grammar

Public API:
    PluralRulesParser: Main parser class
    parse_condition: Condition grammar entry point (advanced usage)
"""

from pluralengine.syntax.parser.core import PluralRulesParser
from pluralengine.syntax.parser.rules import parse_condition

__all__ = ["PluralRulesParser", "parse_condition"]
