"""Output layer: renders ToolResult for terminals, pipes and --json."""
