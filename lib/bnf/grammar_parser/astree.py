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

import sys

class GrammarNode(object):
    """Positional type of a tree node.

    The same lexical token becomes a different node type depending on where
    the parser found it, e.g. an identifier is an `Lhs` in front of a
    production's colon and a `Nonterminal` inside its body.
    """
    kind = None

    def payload(self):
        return ()

    def __eq__(self, other):
        if other.__class__ != self.__class__:
            return False
        return self.payload() == other.payload()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.kind,) + self.payload())

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__, ", ".join([repr(p) for p in self.payload()]))

    @property
    def description(self):
        raise NotImplementedError

class Root(GrammarNode):
    kind = "root"

    @property
    def description(self):
        return "Root Node"

class Grammar(GrammarNode):
    kind = "grammar"

    def __init__(self, name):
        self.name = name

    def payload(self):
        return (self.name,)

    @property
    def description(self):
        return "Grammar: %s" % (self.name,)

class TokenDef(GrammarNode):
    kind = "token"

    def __init__(self, identifier, value):
        self.identifier = identifier
        self.value = value

    def payload(self):
        return (self.identifier, self.value)

    @property
    def description(self):
        return "Token: (%s, %s)" % (self.identifier, self.value)

class Production(GrammarNode):
    kind = "production"

    def __init__(self, number):
        self.number = number

    def payload(self):
        return (self.number,)

    @property
    def description(self):
        return "Production[%s]" % (self.number,)

class Lhs(GrammarNode):
    kind = "lhs"

    def __init__(self, identifier):
        self.identifier = identifier

    def payload(self):
        return (self.identifier,)

    @property
    def description(self):
        return "lhs: %s" % (self.identifier,)

class Terminal(GrammarNode):
    kind = "terminal"

    def __init__(self, symbol):
        self.symbol = symbol

    def payload(self):
        return (self.symbol,)

    @property
    def description(self):
        return "Terminal: %s" % (self.symbol,)

class Nonterminal(GrammarNode):
    kind = "nonterminal"

    def __init__(self, identifier):
        self.identifier = identifier

    def payload(self):
        return (self.identifier,)

    @property
    def description(self):
        return "Nonterminal: %s" % (self.identifier,)

class SemanticAction(GrammarNode):
    kind = "semanticAction"

    def __init__(self, code):
        self.code = code

    def payload(self):
        return (self.code,)

    @property
    def description(self):
        return "Semantic Action: %s" % (self.code,)

class Punctuation(GrammarNode):
    kind = "punctuation"
    symbols = ("|", "[", "]", "(", ")", "{", "}")

    def __init__(self, symbol):
        assert symbol in Punctuation.symbols, symbol
        self.symbol = symbol

    def payload(self):
        return (self.symbol,)

    @property
    def description(self):
        return "Punctuation: %s" % (self.symbol,)

# opening punctuation -> closing punctuation
brackets = {"[": "]", "(": ")", "{": "}"}

class ASTNode(object):

    def __init__(self, node):
        assert isinstance(node, GrammarNode), node
        self.node = node
        self.children = []

    def add_child(self, child):
        self.children.append(child)
        return child

    def traverse(self, visitor):
        """Visits this node, then every descendant depth-first in insertion order."""
        visitor(self)
        for c in self.children:
            c.traverse(visitor)

    def traverse_indented(self, visitor, indentation=""):
        """Like `traverse` but also hands the visitor an indentation string
        that grows by four spaces per level, which is handy for printing."""
        tab = "    "
        visitor(self, indentation)
        for c in self.children:
            c.traverse_indented(visitor, indentation + tab)

    def walk(self):
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    @property
    def description(self):
        return self.node.description

    def __str__(self):
        return self.description

    def __repr__(self):
        return "ASTNode(%r, %s children)" % (self.node, len(self.children))

    def __eq__(self, other):
        if isinstance(other, ASTNode):
            return other.node == self.node and other.children == self.children
        return False

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    # Tree outline for pretty printing

    def tree_lines(self, node_indent="", child_indent=""):
        lines = [node_indent + self.description]
        last = len(self.children) - 1
        for i, c in enumerate(self.children):
            if i < last:
                sub = c.tree_lines("┣╸", "┃ ")
            else:
                sub = c.tree_lines("┗╸", "  ")
            lines.extend([child_indent + l for l in sub])
        return lines

    def tree_string(self):
        return "\n".join(self.tree_lines())

    def pprint(self, out=None):
        if out is None:
            out = sys.stdout
        out.write(self.tree_string() + "\n")
