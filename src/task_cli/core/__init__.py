"""Core logic: TaskTracker and the ports it depends on."""
