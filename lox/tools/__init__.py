# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Build-time and debugging tools for the Lox front end."""
