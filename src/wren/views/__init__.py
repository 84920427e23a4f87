"""Views — controllers, kida-rendered views, models and their bindings.

These are optional collaborators of the router: a route handler
typically asks an ``Orchestrator`` to marshal a controller, which loads
a model and renders a view.
"""
