"""Basic smoke tests for modviz package."""

from modviz.core.exceptions import (
    InputAccessError,
    MalformedRecordError,
    ModvizError,
    SerializationError,
    UnknownPackageError,
)
from modviz.core.models import Direction, ModuleGraph, RenderConfig, to_label


def test_module_graph_creation():
    """Test ModuleGraph starts empty."""
    graph = ModuleGraph()

    assert graph.mods == {}
    assert graph.mod_ids == {}
    assert graph.dependencies == {}
    assert graph.next_id == 1
    assert graph.number_of_nodes() == 0
    assert graph.number_of_edges() == 0


def test_module_graph_add_dependency():
    """Test adding dependencies allocates ids in first-seen order."""
    graph = ModuleGraph()

    graph.add_dependency("a\n1", "b\n1")
    graph.add_dependency("a\n1", "c\n1")
    graph.add_dependency("a\n1", "b\n1")

    assert graph.mods == {"a\n1": 1, "b\n1": 2, "c\n1": 3}
    assert graph.mod_ids == {1: "a\n1", 2: "b\n1", 3: "c\n1"}
    assert graph.dependencies == {1: [2, 3, 2]}
    assert graph.number_of_edges() == 3
    assert graph.source_count() == 1
    assert list(graph.iter_edges()) == [(1, 2), (1, 3), (1, 2)]
    assert "a\n1" in graph
    assert "a@1" not in graph


def test_add_module_is_idempotent():
    """Test looking up a known label never allocates a new id."""
    graph = ModuleGraph()

    assert graph.add_module("x") == 1
    assert graph.add_module("y") == 2
    assert graph.add_module("x") == 1
    assert graph.next_id == 3


def test_to_label():
    """Test only the first @ becomes a line break."""
    assert to_label("golang.org/x/net@v0.17.0") == "golang.org/x/net\nv0.17.0"
    assert to_label("  example.com/app  ") == "example.com/app"
    assert to_label("a@b@c") == "a\nb@c"


def test_render_config_creation():
    """Test RenderConfig model creation."""
    config = RenderConfig()
    assert config.horizontal_threshold == 15
    assert config.node_shape == "box"

    config = RenderConfig(horizontal_threshold=3, node_shape="ellipse")
    assert config.horizontal_threshold == 3
    assert config.node_shape == "ellipse"


def test_exception_hierarchy():
    """Test every error derives from ModvizError and names its stage."""
    malformed = MalformedRecordError(4, "x y z")
    unknown = UnknownPackageError("foo@v1")

    assert isinstance(malformed, ValueError)
    assert malformed.line_number == 4
    assert "line 4" in str(malformed)
    assert "'x y z'" in str(malformed)

    assert isinstance(unknown, ValueError)
    assert str(unknown) == "package foo@v1 not existed"

    assert issubclass(InputAccessError, RuntimeError)
    assert issubclass(SerializationError, RuntimeError)
    for exc in (InputAccessError, MalformedRecordError, UnknownPackageError, SerializationError):
        assert issubclass(exc, ModvizError)

    assert [e.stage for e in (InputAccessError, MalformedRecordError, UnknownPackageError, SerializationError)] == [
        "input",
        "parse",
        "filter",
        "render",
    ]


def test_cli_import():
    """Test that CLI module can be imported."""
    from modviz import cli

    # This should not raise an import error
    assert cli is not None


def test_package_version():
    """Test that package version can be imported."""
    from modviz import __version__

    assert isinstance(__version__, str)
    assert len(__version__) > 0


def test_enums_values():
    """Test that enums have expected values."""
    assert Direction.LEFT_TO_RIGHT.value == "left-to-right"
    assert Direction.TOP_TO_BOTTOM.value == "top-to-bottom"
