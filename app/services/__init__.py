"""Services shared by API routers"""
