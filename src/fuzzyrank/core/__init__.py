"""fuzzyrank core package."""
