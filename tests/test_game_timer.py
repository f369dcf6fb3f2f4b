from rtsgame.game_timer import GameTimer


def test_new_timer_is_idle():
    timer = GameTimer(100.0)
    assert timer.elapsed_time == 0
    assert timer.is_running is False
    assert timer.did_finish() is False


def test_start_runs_and_clears_elapsed():
    timer = GameTimer(100.0)
    timer.update(30.0)
    timer.start()
    assert timer.is_running is True
    assert timer.elapsed_time == 0


def test_update_accumulates_before_duration():
    timer = GameTimer(100.0)
    timer.start()
    assert timer.update(40.0) is False
    assert timer.update(40.0) is False
    assert timer.elapsed_time == 40.0 + 40.0
    assert timer.is_running is True


def test_update_reaching_duration_finishes_and_resets():
    timer = GameTimer(100.0)
    timer.start()
    assert timer.update(60.0) is False
    assert timer.update(60.0) is True
    assert timer.elapsed_time == 0
    assert timer.is_running is False


def test_exact_duration_counts_as_finished():
    timer = GameTimer(50.0)
    timer.start()
    assert timer.update(50.0) is True


def test_reset_can_keep_running():
    timer = GameTimer(10.0)
    timer.update(5.0)
    timer.reset(True)
    assert timer.is_running is True
    assert timer.elapsed_time == 0


def test_reset_defaults_to_stopped():
    timer = GameTimer(10.0)
    timer.start()
    timer.reset()
    assert timer.is_running is False


def test_changing_duration_affects_finish():
    timer = GameTimer(1000.0)
    timer.update(10.0)
    assert timer.did_finish() is False
    timer.duration = 10.0
    assert timer.did_finish() is True


def test_update_counts_even_when_not_started():
    timer = GameTimer(20.0)
    assert timer.update(20.0) is True