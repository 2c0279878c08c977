"""A finite state machine made of actions, transitions and conditions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Type


class Condition(ABC):
    """A predicate on an owner, compared against an expected outcome."""

    def __init__(self) -> None:
        self.expected = True

    def test(self, owner: Any) -> bool:
        """True when the predicate's result matches ``expected``."""
        return self.expected == bool(self.on_test(owner))

    @abstractmethod
    def on_test(self, owner: Any) -> bool:
        """Evaluate the predicate for ``owner``."""


class Transition:
    """A move to ``state`` taken when all its conditions hold."""

    def __init__(self, state: int) -> None:
        self.state = state
        self.conditions: List[Condition] = []

    def add_condition(self, condition_cls: Type[Condition], expected: bool = True) -> Condition:
        """Create a condition of the given class and attach it."""
        if not (isinstance(condition_cls, type) and issubclass(condition_cls, Condition)):
            raise TypeError(f"{condition_cls!r} is not a Condition subclass")
        condition = condition_cls()
        condition.expected = expected
        self.conditions.append(condition)
        return condition

    def try_(self, owner: Any) -> bool:
        """True when every condition passes for ``owner``."""
        return all(condition.test(owner) for condition in self.conditions)


class Action:
    """Behaviour of one state, with the transitions leaving it."""

    def __init__(self) -> None:
        self.transitions: List[Transition] = []

    def create_transition(self, state: int) -> Transition:
        """Add a transition to ``state`` and return it."""
        transition = Transition(state)
        self.transitions.append(transition)
        return transition

    def update(self, owner: Any) -> Optional[int]:
        """Run one step; return the state of the first passing transition, if any."""
        self.on_update(owner)
        for transition in self.transitions:
            if transition.try_(owner):
                return transition.state
        return None

    def on_start(self, owner: Any) -> None:
        """Called when the state is entered."""

    def on_update(self, owner: Any) -> None:
        """Called on every update while the state is active."""

    def on_end(self, owner: Any) -> None:
        """Called when the state is left."""


class StateMachine:
    """Drives an owner through a fixed number of states."""

    def __init__(self, owner: Any, state_count: int) -> None:
        self.owner = owner
        self.current_state: Optional[int] = None
        self.actions: List[Optional[Action]] = [None] * state_count

    def update(self) -> None:
        """Update the current action and follow a transition if one fires."""
        if self.current_state is None:
            return
        next_state = self.actions[self.current_state].update(self.owner)
        if next_state is None:
            return
        self.set_state(next_state)

    def set_state(self, state: int) -> None:
        """Switch to ``state``, ending the previous action and starting the new one."""
        if not 0 <= state < len(self.actions):
            raise IndexError(f"state {state} out of range")
        action = self.actions[state]
        if action is None:
            raise LookupError(f"no action registered for state {state}")
        # The first state (index 0) is left without an end notification.
        current = self.current_state
        if current is not None and 0 < current < len(self.actions):
            self.actions[current].on_end(self.owner)
        self.current_state = state
        action.on_start(self.owner)

    def create_action(self, action_cls: Type[Action], state: int) -> Action:
        """Create the action for ``state`` and return it."""
        if not 0 <= state < len(self.actions):
            raise IndexError(f"state {state} out of range")
        if self.actions[state] is not None:
            raise ValueError(f"state {state} already has an action")
        if not (isinstance(action_cls, type) and issubclass(action_cls, Action)):
            raise TypeError(f"{action_cls!r} is not an Action subclass")
        action = action_cls()
        self.actions[state] = action
        return action