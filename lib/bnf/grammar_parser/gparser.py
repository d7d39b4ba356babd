# Copyright (c) 2012--2013 King's College London
# Created by the Software Development Team <http://soft-dev.org/>
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to
# deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or
# sell copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

"""Recursive descent parser for grammar descriptions.

The grammar of grammar descriptions::

    Syntax      : { Grammar | Tokens | Productions } ;
    Grammar     : 'grammar' Identifier ';' ;
    Tokens      : 'tokens' '{' { Identifier ':' Literal } '}' ;
    Productions : 'productions' '{' { Production } '}' ;
    Production  : Identifier ':' Expression ';' ;
    Expression  : Term { "|" Term } ;
    Term        : Factor { Factor } ;
    Factor      : Identifier
                | Literal
                | "[" Expression "]"
                | "(" Expression ")"
                | "{" Expression "}"
                | "{:" CODE_STRING ":}" ;

A small grammar description looks like this::

    grammar lr_dragon;
    tokens {
      id : "[a-zA-Z]+"
    }
    productions {
        E : E '+' T | T ;
        T : T '*' F | F ;
        F : '(' E ')' | 'id' ;
    }

One token of lookahead is all the parser ever needs. By default the
separators ``:`` and ``;``, the section braces and the closing brackets are
consumed when present and skipped over when absent; ``strict=True`` makes
them mandatory.
"""

import sys
import enum
import logging
import threading

from bnf.grammar_parser.lexer import Tokenizer, Token, IDENTIFIER, LITERAL, KEYWORD, SYMBOL, COMMENT
from bnf.grammar_parser.lexer import symbols as default_symbols, keywords as default_keywords
from bnf.grammar_parser.astree import ASTNode, Root, Grammar, TokenDef, Production, Lhs
from bnf.grammar_parser.astree import Terminal, Nonterminal, SemanticAction, Punctuation, brackets
from bnf.grammar_parser.errors import FileError, ExpressionNotRecognized, UnexpectedToken, UnexpectedEOF
from bnf.grammar_parser.errors import NestingTooDeep

class TraceOptions(enum.IntFlag):
    NONE = 0
    BNF = 1 << 0        # flat "(ASTNode description)" line per node
    BNFTREE = 1 << 1    # box drawing tree
    LEX = 1 << 2        # log every token before parsing

    ALL = BNF | LEX
    PALL = BNFTREE | LEX

class Counter(object):
    """Numbers productions. May be shared between parsers."""

    def __init__(self):
        self.value = 0
        self.lock = threading.Lock()

    def increment(self):
        with self.lock:
            self.value += 1
            return self.value

SYNTAX = "{ Grammar | Tokens | Productions }"
GRAMMAR = "Identifier ';'"
TOKEN = "Identifier ':' Literal"
PRODUCTION = "Identifier ':' Expression ';'"
FACTOR = "Identifier | Literal | [ Expression ] | ( Expression ) | { Expression } | {: CODE_STRING :}"

# tokens that can start a Factor
factor_starts = ["[", "(", "{", "{:"]

class Parser(object):

    def __init__(self, code, level=TraceOptions.NONE, strict=False, counter=None, out=None,
                 symbols=None, keywords=None):
        if symbols is None:
            symbols = default_symbols
        if keywords is None:
            keywords = default_keywords
        self.code = code
        self.level = TraceOptions(level)
        self.strict = strict
        self.counter = counter if counter is not None else Counter()
        self.out = out
        self.tokenizer = Tokenizer(code, filter_comments=True, symbols=symbols, keywords=keywords)
        self.syntax = ASTNode(Root())

    @classmethod
    def from_file(cls, filename, **kwargs):
        if not filename:
            raise FileError(None)
        try:
            with open(filename, encoding="utf-8") as f:
                code = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileError(filename, str(e))
        return cls(code, **kwargs)

    def __repr__(self):
        return self.syntax.tree_string()

    def parse(self):
        """Parses the whole description and returns the root node.

        On a syntax error the ParseError propagates and `self.syntax` keeps
        the nodes built up to that point.
        """
        if self.level & TraceOptions.LEX:
            for t in self.tokenizer.tokens:
                logging.debug("%s %r", t.source_pos, t)
        try:
            self.parse_syntax()
        except RecursionError:
            raise NestingTooDeep(self.last_token(), FACTOR)
        if self.level & TraceOptions.BNF:
            out = self.get_out()
            self.traverse_indented(lambda node, indent: out.write("%s(%s %s)\n" % (indent, node.__class__.__name__, node.description)))
        if self.level & TraceOptions.BNFTREE:
            self.print_pretty()
        return self.syntax

    def last_token(self):
        if self.tokenizer.curtok == 0:
            return None
        return self.tokenizer.tokens[self.tokenizer.curtok - 1]

    def get_out(self):
        if self.out is None:
            return sys.stdout
        return self.out

    def traverse(self, visitor):
        self.syntax.traverse(visitor)

    def traverse_indented(self, visitor):
        self.syntax.traverse_indented(visitor, "")

    def print_pretty(self):
        self.syntax.pprint(self.get_out())

    # token helpers

    def next_token(self, expected):
        t = self.tokenizer.next()
        if t is None:
            raise UnexpectedEOF(expected)
        return t

    def peek_symbol(self, value):
        t = self.tokenizer.peek(1)
        return t is not None and t.name == SYMBOL and t.value == value

    def optional_symbol(self, value):
        """Consumes the symbol if it comes next. In strict mode it must."""
        if self.peek_symbol(value):
            self.tokenizer.consume()
            return True
        if self.strict:
            t = self.tokenizer.peek(1)
            if t is None:
                raise UnexpectedEOF(repr(value))
            raise UnexpectedToken(t, Token(SYMBOL, value))
        return False

    def at_section_end(self):
        return self.tokenizer.peek(1) is None or self.peek_symbol("}")

    # grammar rules

    def parse_syntax(self):
        """
        Syntax : { Grammar | Tokens | Productions }
        """
        while True:
            token = self.tokenizer.next()
            if token is None:
                return
            if token.name == COMMENT:
                continue
            if token.name != KEYWORD:
                raise ExpressionNotRecognized(token, SYNTAX)
            if token.value == "grammar":
                name = self.parse_grammar_section()
                self.syntax.add_child(ASTNode(Grammar(name)))
            elif token.value == "tokens":
                for node in self.parse_token_section():
                    self.syntax.add_child(node)
            elif token.value == "productions":
                for node in self.parse_production_section():
                    self.syntax.add_child(node)
            else:
                raise ExpressionNotRecognized(token, SYNTAX)

    def parse_grammar_section(self):
        """
        Grammar : 'grammar' Identifier ';'

        The keyword has already been consumed.
        """
        token = self.next_token(GRAMMAR)
        if token.name != IDENTIFIER:
            raise ExpressionNotRecognized(token, GRAMMAR)
        self.optional_symbol(";")
        return token.value

    def parse_token_section(self):
        """
        Tokens : 'tokens' '{' { Identifier ':' Literal } '}'
        """
        nodes = []
        self.optional_symbol("{")
        while not self.at_section_end():
            token = self.tokenizer.next()
            if token.name != IDENTIFIER:
                self.skip_token_entry(token)
                continue
            self.optional_symbol(":")
            if self.peek_symbol("}"):
                # leave the closing brace for the section
                self.skip_token_entry(self.tokenizer.peek(1))
                continue
            definition = self.next_token(TOKEN)
            if definition.name != LITERAL:
                self.skip_token_entry(definition)
                continue
            nodes.append(ASTNode(TokenDef(token.value, definition.value)))
        self.optional_symbol("}")
        return nodes

    def skip_token_entry(self, token):
        if self.strict:
            raise ExpressionNotRecognized(token, TOKEN)
        logging.warning("Skipping malformed token definition at %r (%s)", token, token.source_pos)

    def parse_production_section(self):
        """
        Productions : 'productions' '{' { Production } '}'
        """
        productions = []
        self.optional_symbol("{")
        while not self.at_section_end():
            productions.append(self.parse_production())
        self.optional_symbol("}")
        return productions

    def parse_production(self):
        """
        Production : Identifier ':' Expression ';'
        """
        token = self.next_token(PRODUCTION)
        if token.name != IDENTIFIER:
            raise ExpressionNotRecognized(token, PRODUCTION)
        production = ASTNode(Production(self.counter.increment()))
        production.add_child(ASTNode(Lhs(token.value)))
        self.optional_symbol(":")
        self.parse_expression(production)
        self.optional_symbol(";")
        logging.debug("Parsed production %s (%s)", production.node.number, token.value)
        return production

    def parse_expression(self, node):
        """
        Expression : Term { "|" Term }

        All terms and the "|" markers between them become children of `node`.
        """
        self.parse_term(node)
        while self.peek_symbol("|"):
            self.tokenizer.consume()
            node.add_child(ASTNode(Punctuation("|")))
            self.parse_term(node)

    def parse_term(self, node):
        """
        Term : Factor { Factor }
        """
        self.parse_factor(node)
        while self.starts_factor(self.tokenizer.peek(1)):
            self.parse_factor(node)

    def starts_factor(self, token):
        if token is None:
            return False
        if token.name in (IDENTIFIER, LITERAL):
            return True
        return token.name == SYMBOL and token.value in factor_starts

    def parse_factor(self, node):
        """
        Factor : Identifier
               | Literal
               | "[" Expression "]"
               | "(" Expression ")"
               | "{" Expression "}"
               | "{:" CODE_STRING ":}"
        """
        token = self.next_token(FACTOR)

        if token.name == IDENTIFIER:
            node.add_child(ASTNode(Nonterminal(token.value)))
        elif token.name == LITERAL:
            node.add_child(ASTNode(Terminal(token.value)))
        elif token.name == SYMBOL and token.value in brackets:
            closer = brackets[token.value]
            node.add_child(ASTNode(Punctuation(token.value)))
            self.parse_expression(node)
            self.optional_symbol(closer)
            node.add_child(ASTNode(Punctuation(closer)))
        elif token.name == SYMBOL and token.value == "{:":
            code = self.next_token("CODE_STRING ':}'")
            if code.name != LITERAL:
                raise ExpressionNotRecognized(code, "CODE_STRING ':}'")
            node.add_child(ASTNode(SemanticAction(code.value)))
            self.optional_symbol(":}")
        else:
            raise ExpressionNotRecognized(token, FACTOR)

def parse_grammar(code, **kwargs):
    """Parses a grammar description and returns the root ASTNode."""
    return Parser(code, **kwargs).parse()
