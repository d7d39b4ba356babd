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

import re
import logging

KEYWORD = "keyword"
IDENTIFIER = "identifier"
LITERAL = "literal"
SYMBOL = "symbol"
NUMBER = "number"
COMMENT = "comment"
SPACE = "space"
INVALID = "invalid"

whitespace = "[ \t\r\n\f\v]+"
comment = r"//[^\n]*|/\*(?:.|\n)*?\*/"
literal = r'"(?:[^"\\\n]|\\.)*"' + "|" + r"'(?:[^'\\\n]|\\.)*'"  # "..." or '...'
number = r"[0-9]+(?:\.[0-9]+)?"
identifier = "[A-Za-zε][A-Za-z0-9_ε]*(?:-[A-Za-z0-9_ε]+)*"  # e.g. E, opt-list
invalid = r"[\s\S]"

symbols = ["//", "/*", "*/", ":", ",", "->", ".", "\"", ">", "{", "[",
           "{:", "<", "(", "!", "*", "|", "+", "'", "}", "]", ":}", ")", ";"]
keywords = ["grammar", "tokens", "productions"]

def make_groups(expressions):
    regex = []
    for name, expression in expressions:
        s = "(?P<%s>%s)" % (name, expression)
        regex.append(s)
    return r"|".join(regex)

def make_symbol_regex(symbols):
    # longest symbol first so that "{:" wins over "{"
    ordered = sorted(set([s for s in symbols if s]), key=lambda s: (-len(s), s))
    if not ordered:
        return "(?!)"
    return "|".join([re.escape(s) for s in ordered])

class SourcePos(object):
    """An object to record position in source code."""
    def __init__(self, i, lineno, columnno):
        self.i = i                  # index in source string
        self.lineno = lineno        # line number in source
        self.columnno = columnno    # column in line

    def __eq__(self, other):
        if not isinstance(other, SourcePos):
            return False
        return self.__dict__ == other.__dict__

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "SourcePos(%r, %r, %r)" % (self.i, self.lineno, self.columnno)

class Token(object):

    def __init__(self, name, value, source_pos=None):
        self.name = name
        self.value = value
        self.source_pos = source_pos

    def __eq__(self, other):
        # position is ignored, tokens compare by class and payload
        if not isinstance(other, Token):
            return False
        return self.name == other.name and self.value == other.value

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.name, self.value))

    def __repr__(self):
        return "%s(%s)" % (self.name, self.value)

def keyword(value):
    return Token(KEYWORD, value)

def ident(value):
    return Token(IDENTIFIER, value)

def lit(value):
    return Token(LITERAL, value)

def symbol(value):
    return Token(SYMBOL, value)

class Tokenizer(object):
    """Splits a grammar description into classified tokens.

    The whole source is lexed up front; `next`, `peek` and `consume` then
    walk the resulting token list. Whitespace never reaches the stream and
    comments only do when `filter_comments` is false.
    """

    def __init__(self, source, filter_comments=True, symbols=symbols, keywords=keywords):
        self.source = source
        self.filter_comments = filter_comments
        self.symbols = set(symbols)
        self.keywords = set(keywords)
        self.regex = re.compile(make_groups([
            (SPACE, whitespace),
            (COMMENT, comment),
            (LITERAL, literal),
            (NUMBER, number),
            (IDENTIFIER, identifier),
            (SYMBOL, make_symbol_regex(self.symbols)),
            (INVALID, invalid),
        ]))
        self.tokens = []
        self.pos = 0
        self.curtok = 0
        self.lex()

    def lex(self):
        lineno = 1
        linestart = 0
        while self.pos < len(self.source):
            m = self.regex.match(self.source, self.pos)
            name = m.lastgroup
            text = m.group(name)
            source_pos = SourcePos(self.pos, lineno, self.pos - linestart)

            newlines = text.count("\n")
            if newlines:
                lineno += newlines
                linestart = self.pos + text.rindex("\n") + 1
            self.pos = m.end()

            if name == SPACE:
                continue
            if name == COMMENT and self.filter_comments:
                continue
            if name == LITERAL:
                text = text[1:-1]
            elif name == IDENTIFIER and text in self.keywords:
                name = KEYWORD
            elif name == INVALID:
                logging.debug("Invalid character %r at line %s", text, lineno)
            self.tokens.append(Token(name, text, source_pos))

    def next(self):
        """Consumes and returns the next token, or None at the end of input."""
        if self.curtok >= len(self.tokens):
            return None
        t = self.tokens[self.curtok]
        self.curtok += 1
        return t

    def peek(self, ahead=1):
        """Returns the token `ahead` positions forward without consuming it."""
        if ahead < 1:
            raise ValueError("peek distance must be at least 1, got %s" % (ahead,))
        i = self.curtok + ahead - 1
        if i >= len(self.tokens):
            return None
        return self.tokens[i]

    def consume(self):
        if self.curtok < len(self.tokens):
            self.curtok += 1

    def __iter__(self):
        return self

    def __next__(self):
        t = self.next()
        if t is None:
            raise StopIteration
        return t
