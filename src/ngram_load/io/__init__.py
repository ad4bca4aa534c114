"""Corpus file access: line iteration, layout discovery, vocabulary and line parsing."""
