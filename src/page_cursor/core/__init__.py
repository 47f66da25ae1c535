"""Core building blocks shared by page-cursor features."""
