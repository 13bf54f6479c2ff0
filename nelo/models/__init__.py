"""
Models Module
=============

This module contains the rating calculators. Each calculator is an immutable value holding
its parameters and exposing pure functions which take prior ratings and results and return
new ratings without touching their inputs.

Included Rating Systems:
- Elo: The rating system described by Arpad Elo, generalized to any number of competitors
  by comparing each competitor against its neighbours in the final standings.
"""
