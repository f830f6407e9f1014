"""Exercises on images, recursion, stacks and queues, linked lists, deques and binary trees."""

__version__ = "0.1.0"