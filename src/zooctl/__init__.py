"""zooctl — replay a zoo's daily command log against animals, people and food stock."""

__version__ = "0.1.0"
