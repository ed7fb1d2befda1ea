"""Classic data structures and algorithms: arrays, sorting, lists, queues, stacks and trees."""

__version__ = "0.1.0"
__all__ = ["arrays", "sorting", "linked_list", "queues", "stacks", "trees"]