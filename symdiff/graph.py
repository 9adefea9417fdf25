import itertools

from graphviz import Graph

from .pprinter import node_repr


def make_graph():
    G = Graph()
    fontname = "Roboto Mono"
    G.attr("graph", fontname=fontname)
    G.attr("node", fontname=fontname)
    G.attr("node", style="rounded")
    G.attr("node", shape="box")
    G.attr("edge", fontname=fontname)
    return G


def to_graph(expr, G=None):
    """Draw ``expr`` as a tree: one box per node, an edge to each operand.

    A subtree reachable along two paths (e.g. ``g`` in ``g * g``) is drawn
    once per path.
    """
    if G is None:
        G = make_graph()
    counter = itertools.count(1)

    def visit(node):
        node_id = f"n{next(counter)}"
        G.node(node_id, node_repr(node))
        for child in node.children:
            G.edge(node_id, visit(child))
        return node_id

    visit(expr)
    return G
