"""HTTP surface for the task tracker."""
