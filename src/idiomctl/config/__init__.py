"""Runtime configuration — CLI-flag settings and logging setup."""
