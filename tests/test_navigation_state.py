from animated_router.core.state import NavigationStateMachine, Settled, Transitioning


def test_starts_settled_in_initial_route():
    sm = NavigationStateMachine("home")
    assert sm.state == Settled("home")
    assert sm.target_route() == "home"
    assert not sm.is_transitioning


def test_target_from_settled_starts_transition():
    sm = NavigationStateMachine("a")
    assert sm.set_target_route("b") is True
    assert sm.state == Transitioning("a", "b")
    assert sm.target_route() == "b"
    assert sm.is_transitioning


def test_same_target_is_a_no_op():
    sm = NavigationStateMachine("a")
    assert sm.set_target_route("a") is False
    assert sm.state == Settled("a")

    sm.set_target_route("b")
    assert sm.set_target_route("b") is False
    assert sm.state == Transitioning("a", "b")


def test_retarget_departs_from_previous_destination():
    sm = NavigationStateMachine("a")
    sm.set_target_route("b")
    sm.set_target_route("c")
    assert sm.state == Transitioning("b", "c")


def test_retarget_back_to_origin_reverses_pair():
    sm = NavigationStateMachine("a")
    sm.set_target_route("b")
    assert sm.set_target_route("a") is True
    assert sm.state == Transitioning("b", "a")


def test_settle_collapses_to_destination():
    sm = NavigationStateMachine("a")
    sm.set_target_route("b")
    assert sm.settle() is True
    assert sm.state == Settled("b")
    # settling twice changes nothing
    assert sm.settle() is False
    assert sm.state == Settled("b")


def test_listeners_see_old_and_new_state():
    sm = NavigationStateMachine("a")
    seen = []
    sm.add_listener(lambda old, new: seen.append((old, new)))

    sm.set_target_route("b")
    sm.settle()

    assert seen == [
        (Settled("a"), Transitioning("a", "b")),
        (Transitioning("a", "b"), Settled("b")),
    ]


def test_failing_listener_does_not_block_others():
    sm = NavigationStateMachine("a")
    seen = []

    def broken(old, new):
        raise RuntimeError("boom")

    sm.add_listener(broken)
    sm.add_listener(lambda old, new: seen.append(new))
    sm.set_target_route("b")

    assert seen == [Transitioning("a", "b")]
    assert sm.state == Transitioning("a", "b")


def test_removed_listener_is_not_called():
    sm = NavigationStateMachine("a")
    seen = []
    listener = lambda old, new: seen.append(new)
    sm.add_listener(listener)
    sm.remove_listener(listener)
    sm.set_target_route("b")
    assert seen == []


def test_reset_defaults_to_initial_route():
    sm = NavigationStateMachine("a")
    sm.set_target_route("b")
    sm.reset()
    assert sm.state == Settled("a")

    sm.reset("c")
    assert sm.state == Settled("c")


def test_states_are_immutable_values():
    state = Transitioning("a", "b")
    assert state.target_route == "b"
    assert Settled("a").target_route == "a"
    assert state == Transitioning("a", "b")
    assert hash(state) == hash(Transitioning("a", "b"))
