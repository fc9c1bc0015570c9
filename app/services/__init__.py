"""
Campus Records API - Services Layer
====================================

What:  Sits between routes (HTTP) and repositories (persistence).
How:   One EntityService instance per entity turns repository results into
       response schemas, absent rows into EntityNotFoundError, and driver
       failures into DatabaseError.

Service Inventory (app.services.entity_service):
    - menu_item_service
    - organization_service
    - recommendation_request_service
    - help_request_service
    - articles_service
"""
