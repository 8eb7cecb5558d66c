"""Software reference for Advent of Code 2022, day 15: interval sets and sensor coverage."""
