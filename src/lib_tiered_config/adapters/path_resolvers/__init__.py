"""Tier chain path resolver adapter."""
