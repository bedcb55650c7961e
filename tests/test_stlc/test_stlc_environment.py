import pytest

from stlc.environment import Scoping, SharedEnv, EmptyEnv, empty_env


def test_empty_env_scoping():
    assert isinstance(empty_env(), SharedEnv)
    assert isinstance(empty_env(Scoping.SHARED), SharedEnv)
    assert isinstance(empty_env(Scoping.LEXICAL), EmptyEnv)


@pytest.mark.parametrize("scoping", list(Scoping))
def test_lookup(scoping):
    env = empty_env(scoping).bind("x", 1).bind("y", 2)
    assert env.lookup("x") == 1
    assert env["y"] == 2
    assert "x" in env
    assert "z" not in env
    assert env.get("z") is None
    assert env.get("z", 0) == 0

    with pytest.raises(LookupError):
        env.lookup("z")


@pytest.mark.parametrize("scoping", list(Scoping))
def test_rebinding_shadows(scoping):
    env = empty_env(scoping).bind("x", 1).bind("x", 2)
    assert env.lookup("x") == 2
    assert dict(env.items()) == {"x": 2}
    assert len(list(env.items())) == 1


def test_shared_bind_mutates_in_place():
    env = empty_env(Scoping.SHARED)
    assert env.bind("x", 1) is env
    assert env.lookup("x") == 1


def test_lexical_bind_leaves_parent_untouched():
    env = empty_env(Scoping.LEXICAL)
    child = env.bind("x", 1)
    assert child is not env
    assert child.lookup("x") == 1
    assert "x" not in env

    grandchild = child.bind("x", 2)
    assert grandchild.lookup("x") == 2
    assert child.lookup("x") == 1
