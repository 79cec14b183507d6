"""
Reference data endpoints shared by planning and quotation forms.
"""
from rest_framework.decorators import api_view

from planning_project.response_formatter import success_response
from sales.core.constants import PPH_OPTIONS


@api_view(['GET'])
def pph_options(request):
    """
    GET /api/pph-options/
    - Returns the PPh rates a document may use
    """
    data = [{'value': value, 'label': label} for value, label in PPH_OPTIONS]
    return success_response(data=data, message="PPh options retrieved successfully")
