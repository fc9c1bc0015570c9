"""
Campus Records API - Routes Package
====================================

Route Inventory (one family per entity):
    GET    /api/<entity>/all        list every row          USER, ADMIN
    GET    /api/<entity>?id=<id>    fetch one row           USER, ADMIN
    POST   /api/<entity>/post?...   create from query args  ADMIN
    PUT    /api/<entity>?id=<id>    replace mutable fields  ADMIN
    DELETE /api/<entity>?id=<id>    delete one row          ADMIN

    - ucsb_dining_commons_menu_item.py  /api/ucsbdiningcommonsmenuitem
    - ucsb_organization.py              /api/ucsborganization
    - ucsb_recommendation_request.py    /api/recommendationRequest
    - help_request.py                   /api/helprequest
    - articles.py                       /api/articles
    - health.py                         /health (no role required)

Routes are thin: guard, extract parameters, call the entity service.
"""
