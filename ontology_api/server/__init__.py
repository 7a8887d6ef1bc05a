"""HTTP service exposing the OBO hierarchy parser."""
