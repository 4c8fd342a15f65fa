"""Swaywsr - automatically rename sway workspaces after the windows they hold.

Listens to the sway IPC event stream and, on every window or workspace change,
recomputes each workspace name from its index and the icons / aliases of the
applications running in it.
"""
