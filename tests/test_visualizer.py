import random

import pytest

from pixelsorter.actions import Action
from pixelsorter.engine import AnimationEngine, PlaybackMode
from pixelsorter.sorters import load_custom_sorter
from pixelsorter.visualizer import Visualizer

from conftest import FakeGrid, drain


@pytest.fixture
def vis(sound):
    engine = AnimationEngine(FakeGrid(cell_width=50, cell_height=37), sound=sound)
    return Visualizer(engine, element_count=48, max_value=27, rng=random.Random(11))


def test_requires_engine():
    with pytest.raises(ValueError):
        Visualizer(None, 10, 10)


def test_rejects_unknown_algorithm(vis):
    with pytest.raises(KeyError):
        Visualizer(vis.engine, 10, 10, algorithm="bogo")
    with pytest.raises(KeyError):
        vis.select_algorithm("bogo")
    assert vis.algorithm == "quick"


def test_restart_generates_and_queues(vis):
    vis.restart(True)
    assert len(vis.values) == 48
    assert all(0 <= v < 27 for v in vis.values)
    assert vis.values == sorted(vis.values)
    assert len(vis.engine.values) == 48
    assert not vis.engine.queue.is_empty()
    assert vis.engine.mode is PlaybackMode.IDLE
    assert vis.engine.grid.calls[0] == ("clear",)


@pytest.mark.parametrize("key", ["quick", "bubble", "selection", "insertion"])
def test_playback_catches_up(vis, key):
    vis.algorithm = key
    vis.restart(True)
    assert not vis.caught_up()
    drain(vis.engine)
    assert vis.caught_up()
    assert vis.engine.values == sorted(vis.engine.values)


def test_restart_without_regenerating_uses_rendered_array(vis):
    vis.restart(True)
    vis.run_continuous()
    for _ in range(200):
        vis.engine.tick()
    shown = list(vis.engine.values)
    vis.restart(False)
    assert vis.engine.values == shown
    assert vis.values == sorted(shown)
    assert vis.engine.mode is PlaybackMode.IDLE


def test_restart_discards_partial_action(vis):
    vis.load_array([3, 2, 1])
    vis.single_step()
    vis.engine.tick()
    vis.restart(False)
    assert vis.engine.values == [3, 2, 1]
    front = vis.engine.queue.peek()
    assert front.stage == front.total_stages


def test_select_algorithm_restarts_on_current_picture(vis):
    vis.load_array([5, 3, 8, 1])
    vis.select_algorithm("bubble")
    assert vis.algorithm == "bubble"
    assert list(vis.engine.queue)[:3] == [Action.pivot(3), Action.compare(0, 1),
                                          Action.swap(0, 1)]
    drain(vis.engine)
    assert vis.engine.values == [1, 3, 5, 8]


def test_single_element_array(vis):
    vis.load_array([7])
    assert vis.engine.queue.is_empty()
    drain(vis.engine)
    assert vis.engine.values == [7]


def test_step_and_pause(vis):
    vis.load_array([2, 1])
    vis.single_step()
    vis.engine.tick()
    assert vis.engine.mode is PlaybackMode.IDLE
    vis.run_continuous()
    assert vis.engine.mode is PlaybackMode.CONTINUOUS
    vis.pause()
    assert vis.engine.mode is PlaybackMode.IDLE


def test_swap_tones_reach_sound_player(vis, sound):
    vis.load_array([2, 1])
    drain(vis.engine)
    assert sound.tones == [(200 + 600 * 1 // 2, 75)]


def _broken_sorter(tmp_path):
    path = tmp_path / "broken_sorter.py"
    path.write_text(
        "from pixelsorter.actions import Action\n"
        "def sort(arr, sink):\n"
        "    sink(Action.compare(0, 1))\n"
        "    arr[0], arr[1] = arr[1], arr[0]\n"
        "    raise RuntimeError('sorter bug')\n"
    )
    result, err = load_custom_sorter(str(path))
    assert err is None
    return result[1]


def test_failing_sorter_leaves_nothing_queued(vis, tmp_path, restore_algorithms, caplog):
    key = _broken_sorter(tmp_path)
    vis.load_array([3, 1, 2])
    vis.algorithm = key
    assert vis.restart(False) is False
    assert vis.engine.queue.is_empty()
    assert vis.values == vis.engine.values == [3, 1, 2]
    assert vis.engine.mode is PlaybackMode.IDLE
    assert "sorter bug" in caplog.text
    assert "Traceback" in caplog.text


def test_select_failing_sorter_keeps_previous_algorithm(vis, tmp_path, restore_algorithms):
    key = _broken_sorter(tmp_path)
    vis.load_array([3, 1, 2])
    assert vis.select_algorithm(key) is False
    assert vis.algorithm == "quick"
    assert not vis.engine.queue.is_empty()
    drain(vis.engine)
    assert vis.engine.values == [1, 2, 3]
    # later restarts use the working algorithm again
    assert vis.restart(True) is True
