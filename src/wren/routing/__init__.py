"""Routing — compiled route patterns and an ordered route table.

Routes are registered during setup and frozen into a read-only table
when the app starts serving.
"""

from wren.routing.address import RouteAddress, compile_address
from wren.routing.route import Route
from wren.routing.router import Router

__all__ = ["Route", "RouteAddress", "Router", "compile_address"]
