"""Routing — insertion-ordered route table with exact-match lookup.

Bindings are registered during setup and the table is frozen when the
app starts serving.
"""

from shellroute.routing.route import Binding, Method
from shellroute.routing.table import RouteTable, make_binding

__all__ = ["Binding", "Method", "RouteTable", "make_binding"]
