"""Role-based request gate for the HR portal."""
