from shooter.controls import InputSnapshot, KeyState


def test_snapshot_defaults():
    assert KeyState().snapshot() == InputSnapshot(False, False, False)


def test_press_and_release():
    keys = KeyState()
    assert keys.on_key_down("ArrowLeft")
    assert keys.snapshot() == InputSnapshot(left=True)
    keys.on_key_up("ArrowLeft")
    assert keys.snapshot() == InputSnapshot()


def test_both_fire_codes():
    keys = KeyState()
    keys.on_key_down("KeyZ")
    assert keys.snapshot().fire
    keys.on_key_down("Space")
    keys.on_key_up("KeyZ")
    assert keys.snapshot().fire
    keys.on_key_up("Space")
    assert not keys.snapshot().fire


def test_unrecognized_codes_ignored():
    keys = KeyState()
    assert not keys.on_key_down("KeyQ")
    assert not keys.on_key_up("KeyQ")
    assert "KeyQ" not in keys.held
    assert keys.snapshot() == InputSnapshot()


def test_snapshot_is_a_copy():
    keys = KeyState()
    keys.on_key_down("ArrowRight")
    snap = keys.snapshot()
    keys.on_key_up("ArrowRight")
    assert snap.right


def test_release_all():
    keys = KeyState()
    keys.on_key_down("ArrowRight")
    keys.on_key_down("Space")
    keys.release_all()
    assert keys.snapshot() == InputSnapshot()


def test_custom_bindings():
    keys = KeyState({"left": ("KeyA",), "right": ("KeyD",), "fire": ("KeyW",)})
    keys.on_key_down("KeyA")
    assert keys.snapshot().left
    assert not keys.on_key_down("ArrowLeft")
