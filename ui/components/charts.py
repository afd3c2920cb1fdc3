"""
Plotly chart components for displaying the word graph.
"""

from __future__ import annotations

import math
from pathlib import Path

import plotly.graph_objects as go

from textgraph.config import (
    GRAPH_EDGE_COLOR,
    GRAPH_FIGURE_HEIGHT,
    GRAPH_LABEL_FONT_SIZE,
    GRAPH_NODE_COLOR,
    GRAPH_NODE_SIZE,
)
from textgraph.graph.model import Edge


def circular_layout(nodes: list[str]) -> dict[str, tuple[float, float]]:
    """Place nodes evenly on the unit circle, starting at the top."""
    count = max(len(nodes), 1)
    return {
        node: (
            math.cos(math.pi / 2 - 2 * math.pi * i / count),
            math.sin(math.pi / 2 - 2 * math.pi * i / count),
        )
        for i, node in enumerate(nodes)
    }


def create_word_graph_figure(nodes: list[str], edges: list[Edge]) -> go.Figure:
    """Directed graph: words on a circle, arrows labelled with edge weight."""
    positions = circular_layout(nodes)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[positions[n][0] for n in nodes],
        y=[positions[n][1] for n in nodes],
        mode="markers+text",
        text=nodes,
        textposition="top center",
        textfont=dict(size=GRAPH_LABEL_FONT_SIZE),
        marker=dict(size=GRAPH_NODE_SIZE, color=GRAPH_NODE_COLOR, opacity=0.85),
        hovertemplate="<b>%{text}</b><extra></extra>",
        showlegend=False,
    ))

    annotations = []
    for edge in edges:
        x0, y0 = positions[edge.source]
        x1, y1 = positions[edge.target]

        if edge.source == edge.target:
            # Self-loop: short arrow pointing back at the node from outside
            annotations.append(dict(
                x=x0, y=y0, ax=x0 * 1.15, ay=y0 * 1.15 + 0.05,
                xref="x", yref="y", axref="x", ayref="y",
                showarrow=True, arrowhead=2, arrowcolor=GRAPH_EDGE_COLOR,
                text=str(edge.weight), font=dict(size=GRAPH_LABEL_FONT_SIZE),
            ))
            continue

        annotations.append(dict(
            x=x1, y=y1, ax=x0, ay=y0,
            xref="x", yref="y", axref="x", ayref="y",
            showarrow=True, arrowhead=2, arrowsize=1.2, standoff=GRAPH_NODE_SIZE / 2,
            arrowcolor=GRAPH_EDGE_COLOR, text="",
        ))
        # Weight label a little past the midpoint, so a<->b labels don't overlap
        annotations.append(dict(
            x=x0 + (x1 - x0) * 0.6, y=y0 + (y1 - y0) * 0.6,
            xref="x", yref="y", showarrow=False,
            text=str(edge.weight), font=dict(size=GRAPH_LABEL_FONT_SIZE, color=GRAPH_EDGE_COLOR),
        ))

    fig.update_layout(
        title="Word Graph",
        annotations=annotations,
        showlegend=False,
        height=GRAPH_FIGURE_HEIGHT,
        margin=dict(t=45, b=20, l=20, r=20),
        plot_bgcolor="white",
    )
    fig.update_xaxes(visible=False, range=[-1.4, 1.4])
    fig.update_yaxes(visible=False, range=[-1.4, 1.4], scaleanchor="x")
    return fig


def save_word_graph_html(nodes: list[str], edges: list[Edge], path: str | Path) -> Path:
    """Render the graph and write it as a standalone HTML page."""
    path = Path(path)
    create_word_graph_figure(nodes, edges).write_html(str(path), include_plotlyjs="cdn")
    return path
