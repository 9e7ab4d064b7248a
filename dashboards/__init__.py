"""
Dashboard packages grouping the yearly, monthly, and weekly sales views.

Each submodule owns its own rendering logic so tweaks in one view do not
accidentally impact the others; aggregation lives in dashboard_components.
"""
