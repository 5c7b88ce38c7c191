"""WSL detection and the Windows-side address announcement."""
