"""
Interaction layer: tokenizing, action vocabulary and command parsing.

Deterministic: no learned weights, no network, the same registry and
input always give the same command.
"""
from .tokenizer import STOP_WORDS, is_stop_word, parse_number, parse_percentage, tokenize
from .action_table import ACTION_MAPPINGS, ActionMapping, find_action, mapping_for_service
from .command_parser import CommandParser

__all__ = [
    "STOP_WORDS",
    "is_stop_word",
    "parse_number",
    "parse_percentage",
    "tokenize",
    "ACTION_MAPPINGS",
    "ActionMapping",
    "find_action",
    "mapping_for_service",
    "CommandParser",
]
