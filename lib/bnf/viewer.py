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

import pydot

from bnf.grammar_parser.astree import Punctuation, Terminal, Nonterminal

class Viewer(object):
    """Draws grammar trees with graphviz."""

    def __init__(self, fontname="Arial", fontsize="8"):
        self.fontname = fontname
        self.fontsize = fontsize
        self.countnodes = 0

    def create_pydot_graph(self, tree):
        graph = pydot.Dot(graph_type='graph')
        self.countnodes = 0
        self.add_node_to_tree(tree, graph)
        return graph

    def add_node_to_tree(self, node, graph):
        label = node.description
        label = label.replace("\\", "\\\\")
        label = label.replace("\"", "\\\"")
        dotnode = pydot.Node("n%s" % self.countnodes, label='"%s"' % label)
        self.countnodes += 1
        if isinstance(node.node, Punctuation):
            dotnode.set('shape', 'plaintext')
        elif isinstance(node.node, Terminal):
            dotnode.set('shape', 'box')
        elif isinstance(node.node, Nonterminal):
            dotnode.set('shape', 'ellipse')
        dotnode.set('fontsize', self.fontsize)
        dotnode.set('fontname', self.fontname)
        graph.add_node(dotnode)

        for c in node.children:
            c_node = self.add_node_to_tree(c, graph)
            graph.add_edge(pydot.Edge(dotnode, c_node))
        return dotnode

    def create_dot_string(self, tree):
        return self.create_pydot_graph(tree).to_string()

    def write_dot(self, tree, filename):
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.create_dot_string(tree))

    def write_png(self, tree, filename):
        # needs the graphviz binaries
        self.create_pydot_graph(tree).write_png(filename)
