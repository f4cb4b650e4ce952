"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks both feature packages use
(settings, logging, DB pool wiring). Keep entity SQL in the corresponding
feature package (`users/`, `posts/`).
"""
