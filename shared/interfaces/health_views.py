"""
Health check views.
"""
import logging

from django.db import DatabaseError, connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


class HealthCheckView(APIView):
    """Liveness probe."""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'healthy'}, status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe - checks the category store is reachable."""
    permission_classes = [AllowAny]

    def get(self, request):
        database = self._check_database()
        status_code = status.HTTP_200_OK if database['healthy'] else status.HTTP_503_SERVICE_UNAVAILABLE

        return Response(
            {
                'status': 'ready' if database['healthy'] else 'not_ready',
                'checks': {'database': database},
            },
            status=status_code,
        )

    def _check_database(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            return {'healthy': True}
        except DatabaseError as e:
            logger.error("Database readiness check failed: %s", e)
            return {'healthy': False, 'error': str(e)}
