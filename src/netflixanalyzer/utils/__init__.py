"""Utility helpers for Netflix Analyzer."""
