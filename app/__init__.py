"""Ice cream parlour content API"""
