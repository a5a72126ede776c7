"""Tests for wantscan."""
