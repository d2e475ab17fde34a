"""Install and hook direnv and devbox into the user's shell."""

__version__ = "0.1.0"
