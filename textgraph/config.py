"""
Configuration constants for the Text-to-Graph project.

All paths, settings, and tunable parameters are defined here.
Values that vary per machine are read from environment variables,
optionally supplied through a .env file at the project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of textgraph/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# Where a finished random walk is written ("a -> b -> c")
WALK_OUTPUT_PATH = Path(os.environ.get("WALK_OUTPUT_PATH", "random_walk.txt"))

# Where the rendered graph figure is saved
GRAPH_HTML_PATH = Path(os.environ.get("GRAPH_HTML_PATH", "word_graph.html"))

# Encoding used when reading corpora and writing walks
FILE_ENCODING = "utf-8"

# =============================================================================
# Query Configuration
# =============================================================================

# Separator used when rendering paths and walks
PATH_SEPARATOR = " -> "

# Default seed for text generation and random walks (None = unseeded)
_seed = os.environ.get("TEXTGRAPH_SEED")
RANDOM_SEED: int | None = int(_seed) if _seed else None

# =============================================================================
# Visualization Configuration
# =============================================================================

# Plotly figure settings for the word graph
GRAPH_NODE_SIZE = 28
GRAPH_NODE_COLOR = "#3498db"
GRAPH_EDGE_COLOR = "#7f8c8d"
GRAPH_LABEL_FONT_SIZE = 14
GRAPH_FIGURE_HEIGHT = 800

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
