"""Runtime orchestration: command dispatch, terminal lifecycle, config, and logging."""
