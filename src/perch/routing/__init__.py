"""Routing — ordered route table with first-match-wins dispatch.

Routes are registered during setup and frozen into an immutable
table when the app freezes.
"""
