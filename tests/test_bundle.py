import logging

from shaderpack import Bundle, FileEntry, ProgramInfo, Stage


def test_bundle_add():
    bundle = Bundle()
    assert bundle.is_empty()

    bundle.add(FileEntry("common", "A", True))
    bundle.add(FileEntry("basic_vertex", "B"))
    bundle.add(FileEntry("basic_fragment", "C"))

    assert not bundle.is_empty()
    assert [e.name for e in bundle.includes] == ["common"]
    assert [e.name for e in bundle.shaders] == ["basic_vertex", "basic_fragment"]
    assert bundle.summary() == "1 includes, 2 shaders, 0 programs"


def test_bundle_duplicate_entry_replaces(caplog):
    bundle = Bundle()
    bundle.add_shader(FileEntry("a_vertex", "first"))
    bundle.add_shader(FileEntry("b_vertex", "other"))
    with caplog.at_level(logging.WARNING, logger="shaderpack"):
        bundle.add_shader(FileEntry("a_vertex", "second"))

    # Replaced in place
    assert [(e.name, e.source) for e in bundle.shaders] == [
        ("a_vertex", "second"),
        ("b_vertex", "other"),
    ]
    assert "Duplicate shader 'a_vertex'" in caplog.text


def test_bundle_assign_stage():
    bundle = Bundle()
    bundle.assign_stage("basic", Stage.fragment, "basic_fragment")
    assert bundle.programs == {"basic": ProgramInfo("", "basic_fragment", "")}

    bundle.assign_stage("basic", Stage.vertex, "basic_vertex")
    bundle.assign_stage("basic", Stage.geometry, "basic_geometry")
    assert bundle.programs["basic"] == ProgramInfo(
        "basic_vertex", "basic_fragment", "basic_geometry"
    )
    assert bundle.programs["basic"].vertex == "basic_vertex"


def test_bundle_assign_stage_twice_warns(caplog):
    bundle = Bundle()
    bundle.assign_stage("foo", Stage.vertex, "foo_vertex")

    # Same name again is not a conflict
    with caplog.at_level(logging.WARNING, logger="shaderpack"):
        bundle.assign_stage("foo", Stage.vertex, "foo_vertex")
    assert not caplog.records

    with caplog.at_level(logging.WARNING, logger="shaderpack"):
        bundle.assign_stage("foo", Stage.vertex, "other_vertex")
    assert "more than one vertex shader" in caplog.text
    assert bundle.programs["foo"].vertex == "other_vertex"


def test_bundle_sorted_programs():
    bundle = Bundle()
    bundle.assign_stage("zeta", Stage.vertex, "zeta_vertex")
    bundle.assign_stage("alpha", Stage.vertex, "alpha_vertex")
    assert [name for name, _ in bundle.sorted_programs()] == ["alpha", "zeta"]
