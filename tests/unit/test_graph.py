"""
Unit tests for building module graphs from descriptions.
"""
import pytest

from pynoisegraph import graph
from pynoisegraph.exceptions import InvalidParameterError
from pynoisegraph.module import Billow, Clamp, Const, Exponent, Module, Perlin


@pytest.fixture
def terrain_description():
    return {
        "nodes": [
            {"id": "base", "type": "Perlin", "params": {"octave_count": 4, "seed": 3}},
            {"id": "curve", "type": "Exponent", "params": {"exponent": 2.0},
             "sources": ["base"]},
            {"id": "out", "type": "Clamp",
             "params": {"lower_bound": -0.5, "upper_bound": 0.5},
             "sources": ["curve"]},
        ],
        "root": "out",
    }


class TestRegistry:

    @pytest.mark.unit
    def test_builtin_modules_registered(self):
        for cls in (Const, Perlin, Billow, Clamp, Exponent):
            assert graph.REGISTRY[cls.__name__] is cls

    @pytest.mark.unit
    def test_register_custom_module(self):
        class Negate(Module):
            source_module_count = 1

            def get_value(self, x, y, z):
                return -self.get_source_module(0).get_value(x, y, z)

        try:
            assert graph.register(Negate) is Negate
            root = graph.build_graph({
                "nodes": [
                    {"id": "c", "type": "Const", "params": {"const_value": 0.25}},
                    {"id": "n", "type": "Negate", "sources": ["c"]},
                ],
            })
            assert root.get_value(0.0, 0.0, 0.0) == -0.25
        finally:
            graph.REGISTRY.pop("Negate", None)

    @pytest.mark.unit
    def test_register_rejects_non_modules(self):
        with pytest.raises(TypeError):
            graph.register(dict)
        with pytest.raises(TypeError):
            graph.register("Perlin")


class TestBuildGraph:

    @pytest.mark.unit
    def test_matches_hand_wired_graph(self, terrain_description, sample_points):
        root = graph.build_graph(terrain_description)
        expected = Clamp(Exponent(Perlin(octave_count=4, seed=3), exponent=2.0),
                         lower_bound=-0.5, upper_bound=0.5)
        assert isinstance(root, Clamp)
        for x, y, z in sample_points:
            assert root.get_value(x, y, z) == expected.get_value(x, y, z)

    @pytest.mark.unit
    def test_build_modules_returns_every_node(self, terrain_description):
        modules = graph.build_modules(terrain_description)
        assert list(modules) == ["base", "curve", "out"]
        assert modules["out"].get_source_module(0) is modules["curve"]
        assert modules["curve"].get_source_module(0) is modules["base"]

    @pytest.mark.unit
    def test_root_defaults_to_last_node(self, terrain_description):
        del terrain_description["root"]
        assert isinstance(graph.build_graph(terrain_description), Clamp)

    @pytest.mark.unit
    def test_explicit_inner_root(self, terrain_description):
        terrain_description["root"] = "base"
        assert isinstance(graph.build_graph(terrain_description), Perlin)

    @pytest.mark.unit
    def test_shared_source(self):
        root = graph.build_graph({
            "nodes": [
                {"id": "c", "type": "Const", "params": {"const_value": 0.0}},
                {"id": "a", "type": "Exponent", "params": {"exponent": 2.0}, "sources": ["c"]},
                {"id": "b", "type": "Clamp", "sources": ["c"]},
            ],
        })
        assert root.get_value(1.0, 1.0, 1.0) == 0.0


class TestInvalidDescriptions:

    @pytest.mark.unit
    @pytest.mark.parametrize("description", [
        None,
        [],
        {},
        {"nodes": []},
        {"nodes": "Perlin"},
        {"nodes": ["Perlin"]},
        {"nodes": [{"type": "Perlin"}]},
        {"nodes": [{"id": "", "type": "Perlin"}]},
    ])
    def test_malformed(self, description):
        with pytest.raises(InvalidParameterError):
            graph.build_graph(description)

    @pytest.mark.unit
    def test_unknown_type(self):
        with pytest.raises(InvalidParameterError, match="unknown module type"):
            graph.build_graph({"nodes": [{"id": "a", "type": "Voronoi"}]})

    @pytest.mark.unit
    def test_duplicate_id(self):
        with pytest.raises(InvalidParameterError, match="duplicate"):
            graph.build_graph({"nodes": [
                {"id": "a", "type": "Perlin"},
                {"id": "a", "type": "Billow"},
            ]})

    @pytest.mark.unit
    def test_forward_reference(self):
        with pytest.raises(InvalidParameterError, match="not defined before"):
            graph.build_graph({"nodes": [
                {"id": "out", "type": "Clamp", "sources": ["base"]},
                {"id": "base", "type": "Perlin"},
            ]})

    @pytest.mark.unit
    def test_self_reference(self):
        with pytest.raises(InvalidParameterError):
            graph.build_graph({"nodes": [{"id": "a", "type": "Clamp", "sources": ["a"]}]})

    @pytest.mark.unit
    @pytest.mark.parametrize("node", [
        {"id": "c", "type": "Clamp"},
        {"id": "c", "type": "Clamp", "sources": ["p", "p"]},
        {"id": "c", "type": "Perlin", "sources": ["p"]},
    ])
    def test_wrong_source_count(self, node):
        with pytest.raises(InvalidParameterError, match="source module"):
            graph.build_graph({"nodes": [{"id": "p", "type": "Perlin"}, node]})

    @pytest.mark.unit
    def test_rejected_params(self):
        with pytest.raises(InvalidParameterError, match="node 'p'"):
            graph.build_graph({"nodes": [
                {"id": "p", "type": "Perlin", "params": {"octave_count": 31}},
            ]})

    @pytest.mark.unit
    def test_unknown_param(self):
        with pytest.raises(InvalidParameterError, match="node 'p'"):
            graph.build_graph({"nodes": [
                {"id": "p", "type": "Perlin", "params": {"octaves": 3}},
            ]})

    @pytest.mark.unit
    def test_unknown_root(self, terrain_description):
        terrain_description["root"] = "missing"
        with pytest.raises(InvalidParameterError, match="root"):
            graph.build_graph(terrain_description)

    @pytest.mark.unit
    @pytest.mark.parametrize("type_name", [["Perlin"], {"name": "Perlin"}, None, 3])
    def test_non_string_type(self, type_name):
        with pytest.raises(InvalidParameterError, match="unknown module type"):
            graph.build_graph({"nodes": [{"id": "a", "type": type_name}]})

    @pytest.mark.unit
    @pytest.mark.parametrize("ref", [["p"], {"id": "p"}, 0])
    def test_non_string_source_ref(self, ref):
        with pytest.raises(InvalidParameterError, match="not defined before"):
            graph.build_graph({"nodes": [
                {"id": "p", "type": "Perlin"},
                {"id": "c", "type": "Clamp", "sources": [ref]},
            ]})

    @pytest.mark.unit
    def test_sources_must_be_a_list(self):
        with pytest.raises(InvalidParameterError, match="sources"):
            graph.build_graph({"nodes": [
                {"id": "p", "type": "Perlin"},
                {"id": "c", "type": "Clamp", "sources": "p"},
            ]})

    @pytest.mark.unit
    def test_params_must_be_a_mapping(self):
        with pytest.raises(InvalidParameterError, match="params"):
            graph.build_graph({"nodes": [{"id": "p", "type": "Perlin", "params": [1, 2]}]})

    @pytest.mark.unit
    @pytest.mark.parametrize("root", [["out"], {"id": "out"}, 1])
    def test_non_string_root(self, terrain_description, root):
        terrain_description["root"] = root
        with pytest.raises(InvalidParameterError, match="root"):
            graph.build_graph(terrain_description)
