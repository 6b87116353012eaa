"""Slop: prompt-to-video scene analysis for short-form video generation."""
