from .priority_frontier import EmptyFrontierError, PriorityFrontier
