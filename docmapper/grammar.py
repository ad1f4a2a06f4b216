"""
Path expression grammar.

A path is a sequence of segments separated by literal dots. Segments may be
empty and keep their whitespace (tabs included), so every element skips
pyparsing's default whitespace handling and the input is never tab-expanded.
"""
import pyparsing as pp

dot = pp.Suppress(pp.Literal('.').leave_whitespace())
chars = pp.CharsNotIn('.').leave_whitespace()
segment = pp.Optional(chars, default='').leave_whitespace()

template = (segment + pp.ZeroOrMore(dot + segment)).leave_whitespace().parse_with_tabs()
