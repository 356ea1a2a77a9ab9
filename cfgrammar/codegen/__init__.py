"""Text emitters for in-memory grammars."""

from .emit_text import emit_text_to_string, emit_rule, emit_derivation
