# Routes package init
"""
FriendList API: Routes Package
=================================

Route Inventory:
    - health.py:   GET /                      (liveness message)
                   GET /health                (MongoDB reachability)
    - friends.py:  POST/GET /friends, GET/PUT/DELETE /friends/{id}
    - posts.py:    POST/GET /posts,   GET/PUT/DELETE /posts/{id}

Routes are thin: read the body and path id, call the service, return the
success status. Every failure is an exception handled in main.py.
"""
