"""
# Tests of the fraction type and the console calculator.
#
# End-to-end tests drive the menu through `runner_testing`, which feeds
# the given text as input and captures everything that is printed.
"""
