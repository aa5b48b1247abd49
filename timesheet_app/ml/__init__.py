"""TF-IDF task inference over labeled timesheet remarks."""
