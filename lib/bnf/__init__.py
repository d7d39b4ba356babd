"""
Parser for grammar descriptions written in an EBNF-like notation.

A description consists of a ``grammar`` name, a ``tokens`` section of
terminal definitions and a ``productions`` section of rules. Parsing turns
it into a tree of ASTNode objects under a single root; every node is tagged
with a GrammarNode subclass telling where in the description the underlying
token was found (production number, left-hand side, terminal, nonterminal,
punctuation and so on).

    >>> from bnf import parse_grammar
    >>> root = parse_grammar("grammar g; productions { S : 'a' S | 'b' ; }")
    >>> root.pprint()
"""
from bnf.grammar_parser.lexer import Token, SourcePos, Tokenizer
from bnf.grammar_parser.astree import ASTNode, GrammarNode, Root, Grammar, TokenDef, Production, Lhs
from bnf.grammar_parser.astree import Terminal, Nonterminal, SemanticAction, Punctuation
from bnf.grammar_parser.errors import BnfError, FileError, ParseError
from bnf.grammar_parser.errors import ExpressionNotRecognized, UnexpectedToken, UnexpectedEOF, NestingTooDeep
from bnf.grammar_parser.gparser import Parser, TraceOptions, Counter, parse_grammar
