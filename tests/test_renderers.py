import pytest

from boardview.renderers import (
    PREFERRED,
    Renderer,
    init_best_renderer,
    next_renderer,
    renderer_from_int,
)


class FakeRenderer:
    def __init__(self, kind, ok):
        self.kind = kind
        self.ok = ok

    def init(self):
        return self.ok


def recording_factory(working):
    calls = []

    def factory(kind):
        calls.append(kind)
        return FakeRenderer(kind, kind in working)

    return factory, calls


def test_next_renderer_cycles():
    assert next_renderer(Renderer.OPENGL1) is Renderer.OPENGL3
    assert next_renderer(Renderer.OPENGL3) is Renderer.DEFAULT
    assert next_renderer(Renderer.DEFAULT) is Renderer.OPENGL1


def test_preferred_renderer_is_tried_first():
    factory, calls = recording_factory({Renderer.OPENGL1, Renderer.OPENGL3})
    result = init_best_renderer(PREFERRED, factory)
    assert result.kind is Renderer.OPENGL3
    assert calls == [Renderer.OPENGL3]


def test_renderer_from_int_known():
    assert renderer_from_int(1) is Renderer.OPENGL1
    assert renderer_from_int(2) is Renderer.OPENGL3
    assert renderer_from_int(3) is Renderer.DEFAULT


def test_renderer_from_int_too_large(capsys):
    assert renderer_from_int(7) is Renderer.DEFAULT
    assert "Unknown renderer specified: 7" in capsys.readouterr().err


def test_renderer_from_int_too_small():
    with pytest.raises(ValueError):
        renderer_from_int(0)


def test_preferred_works_first_try():
    factory, calls = recording_factory({Renderer.OPENGL3})
    result = init_best_renderer(Renderer.OPENGL3, factory)
    assert result.kind is Renderer.OPENGL3
    assert calls == [Renderer.OPENGL3]


def test_falls_back_to_opengl1():
    factory, calls = recording_factory({Renderer.OPENGL1})
    result = init_best_renderer(Renderer.OPENGL3, factory)
    assert result.kind is Renderer.OPENGL1
    assert calls == [Renderer.OPENGL3, Renderer.OPENGL1]


def test_all_fail_returns_none():
    factory, calls = recording_factory(set())
    assert init_best_renderer(Renderer.OPENGL3, factory) is None
    assert calls == [Renderer.OPENGL3, Renderer.OPENGL1]


def test_default_preference_skips_itself():
    factory, calls = recording_factory({Renderer.OPENGL3})
    result = init_best_renderer(Renderer.DEFAULT, factory)
    assert result.kind is Renderer.OPENGL3
    assert calls == [Renderer.OPENGL1, Renderer.OPENGL3]


def test_unavailable_renderer_is_skipped():
    def factory(kind):
        return None if kind is Renderer.OPENGL3 else FakeRenderer(kind, True)

    result = init_best_renderer(Renderer.OPENGL3, factory)
    assert result.kind is Renderer.OPENGL1