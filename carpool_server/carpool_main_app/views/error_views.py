"""JSON replacements for Django's default error pages"""
from django.http import JsonResponse


def route_not_found(request, exception=None):
    return JsonResponse({'error': 'Route not found'}, status=404)


def server_error(request):
    return JsonResponse({'error': 'Internal server error'}, status=500)
