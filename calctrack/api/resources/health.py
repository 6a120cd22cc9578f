from flask_restful import Resource


class HealthCheck(Resource):
    def get(self):
        """Controller: Check API health & list available routes"""
        routes = {
            "status": "healthy",
            "message": "Backend API is running",
            "routes": {
                "/": "Health check & list all routes",
                "/api/auth/register": "Register new user",
                "/api/auth/login": "Login user",
                "/api/auth/logout": "Logout current session",
                "/api/auth/me": "Get current user info",
                "/api/calculations": "List or create calculations",
                "/api/calculations/<id>": "Get, update or delete a calculation",
                "/api/projects": "List or create projects",
                "/api/projects/<id>": "Get, update or delete a project",
                "/api/stats": "Dashboard counters for the current user",
            }
        }
        return routes, 200
