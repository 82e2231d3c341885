"""Data models for kubelens."""
