"""
Unit tests for the session facade and walk persistence.
"""

from textgraph.graph import WordGraph
from textgraph.queries import WalkResult
from textgraph.session import TextGraphSession, write_walk


class TestSessionMessages:
    """Test user-facing result messages."""

    def test_bridge_words_found(self, cat_graph):
        """Input should be lowercased before the query."""
        session = TextGraphSession(cat_graph, seed=0)
        assert session.query_bridge_words("The", "SAT") == (
            "The bridge words from the to sat are: cat."
        )

    def test_bridge_words_unknown(self, cat_graph):
        """The missing word should be named."""
        session = TextGraphSession(cat_graph, seed=0)
        assert session.query_bridge_words("the", "zzz") == "No zzz in the graph!"

    def test_bridge_words_none(self, cat_graph):
        """No bridge should give the no-bridge message."""
        session = TextGraphSession(cat_graph, seed=0)
        assert session.query_bridge_words("the", "cat") == "No bridge words from the to cat!"

    def test_shortest_path(self, cat_graph):
        """Path and weight should be shown on two lines."""
        session = TextGraphSession(cat_graph, seed=0)
        assert session.calc_shortest_path("the", "mat") == (
            "Shortest path from the to mat: the -> mat\nPath weight: 1"
        )

    def test_shortest_path_errors(self, cat_graph):
        """Unknown words and unreachable targets should give messages."""
        session = TextGraphSession(cat_graph, seed=0)
        assert session.calc_shortest_path("dog", "mat") == "No dog in the graph!"
        assert session.calc_shortest_path("mat", "the") == "No path from mat to the!"
        # The session keeps working after errors
        assert session.calc_shortest_path("cat", "sat").endswith("Path weight: 1")

    def test_shortest_paths_from_one_word(self, cat_graph):
        """One line per reachable word, sorted by word."""
        session = TextGraphSession(cat_graph, seed=0)
        lines = session.calc_shortest_paths("sat").splitlines()
        assert lines[0] == "cat: sat -> on -> the -> cat (weight 3)"
        assert len(lines) == 4
        assert session.calc_shortest_paths("mat") == "No path from mat to any other word!"

    def test_generate_new_text(self, cat_graph):
        """Generation should insert bridges."""
        session = TextGraphSession(cat_graph, seed=0)
        assert session.generate_new_text("the sat") == "the cat sat"

    def test_show_graph(self, cat_graph):
        """show_graph should return the export enumeration."""
        nodes, edges = TextGraphSession(cat_graph, seed=0).show_graph()
        assert len(nodes) == 5
        assert len(edges) == 5


class TestRandomWalkPersistence:
    """Test walks run through the session."""

    def test_walk_written_to_file(self, cat_graph, tmp_path):
        """The rendered walk should be written to the output file."""
        session = TextGraphSession(cat_graph, seed=0)
        output = tmp_path / "random_walk.txt"
        rendered = session.random_walk(output_path=output)
        assert output.read_text(encoding="utf-8") == rendered
        assert rendered == " -> ".join(session.last_walk.path)

    def test_walk_without_output(self, cat_graph):
        """No file should be needed when output_path is None."""
        session = TextGraphSession(cat_graph, seed=0)
        assert session.random_walk()
        assert session.last_walk is not None

    def test_walk_empty_graph(self):
        """An empty graph should give a message instead of raising."""
        session = TextGraphSession(WordGraph(), seed=0)
        assert session.random_walk() == "The graph is empty!"
        assert session.last_walk is None

    def test_write_walk(self, tmp_path):
        """write_walk should store the arrow-joined path."""
        path = write_walk(WalkResult(path=["a", "b", "c"]), tmp_path / "walk.txt")
        assert path.read_text(encoding="utf-8") == "a -> b -> c"
