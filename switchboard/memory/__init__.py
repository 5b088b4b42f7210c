"""Persistence package.

Module split:
    - `project_store`: JSON-file repository for projects, saved steps and
      planned workflow steps.
"""
