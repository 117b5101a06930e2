"""Watch GitHub Actions workflow runs from the terminal."""
