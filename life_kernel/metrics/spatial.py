"""Spatial metrics over the live-cell adjacency graph (Moore neighbourhood)."""

from __future__ import annotations

import networkx as nx

from life_kernel.domain.board import Board
from life_kernel.domain.neighbors import NEIGHBOUR_OFFSETS


def live_cell_graph(board: Board) -> nx.Graph:
    """Graph with one node per live cell and an edge between touching live cells.

    Edges follow the board's sharp edges: cells on opposite borders never touch.
    """
    alive = set(board.alive_cells())
    graph = nx.Graph()
    graph.add_nodes_from(alive)
    for x, y in alive:
        # Half the offsets suffice; the other half is the same edge reversed.
        for dx, dy in NEIGHBOUR_OFFSETS[4:]:
            other = (x + dx, y + dy)
            if other in alive:
                graph.add_edge((x, y), other)
    return graph


def cluster_count(board: Board) -> int:
    """Count 8-connected groups of live cells."""
    if board.is_empty():
        return 0
    return nx.number_connected_components(live_cell_graph(board))


def largest_cluster_size(board: Board) -> int:
    """Size of the largest 8-connected group of live cells (0 when empty)."""
    if board.is_empty():
        return 0
    return max(len(component) for component in nx.connected_components(live_cell_graph(board)))
