"""
Command-line interface entry points for wordforms.

Entry points:
- wordforms-be: Build the word-form lists from a GrammarDB checkout
"""
