"""UI-agnostic core: ports, state and the task list presenter."""
