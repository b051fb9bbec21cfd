from conftest import make_exercise

from fitplan.catalog import load_catalog
from fitplan.progression import MAX_SETS, apply_progression, progress_exercise, week_number


def test_week_number():
    assert week_number(1) == 1
    assert week_number(7) == 1
    assert week_number(8) == 2
    assert week_number(70) == 10


def test_first_week_adds_reps_only():
    ex = progress_exercise(make_exercise("a", sets=3, reps=10), 1)
    assert ex.sets == 3
    assert ex.reps == 11


def test_second_week_adds_a_set():
    ex = progress_exercise(make_exercise("a", sets=3, reps=10), 2)
    assert ex.sets == 4
    assert ex.reps == 12


def test_sets_capped():
    ex = progress_exercise(make_exercise("a", sets=MAX_SETS), 3)
    assert ex.sets == MAX_SETS


def test_reps_and_duration_caps():
    reps = progress_exercise(make_exercise("a", reps=12), 9)
    assert reps.reps == 17
    timed = progress_exercise(make_exercise("b", reps=None, duration=20), 9)
    assert timed.duration == 50


def test_descriptive_reps_untouched():
    ex = progress_exercise(make_exercise("a", reps="10 each leg"), 4)
    assert ex.reps == "10 each leg"
    assert ex.sets == 4


def test_progression_does_not_mutate_catalog_entry():
    base = make_exercise("a", sets=3, reps=10)
    apply_progression([base], 15)
    assert base.sets == 3
    assert base.reps == 10


def test_progression_monotonic_for_catalog():
    catalog = load_catalog()
    for ex in catalog.exercises:
        previous = None
        for week in range(1, 13):
            current = progress_exercise(ex, week)
            if previous is not None:
                if current.sets is not None:
                    assert current.sets >= previous.sets
                if isinstance(current.reps, int):
                    assert current.reps >= previous.reps
                if current.duration is not None:
                    assert current.duration >= previous.duration
            previous = current
