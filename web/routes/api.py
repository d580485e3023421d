"""
API routes for the fact-check web application.
Exposes the analysis pipeline as JSON endpoints.
"""

from flask import Blueprint, request, jsonify
from web.utils.decorators import rate_limit
from factcheck.api import FactCheckAPI, create_factcheck_api
from factcheck.config import FactCheckConfig
from factcheck.errors import InvalidInputError
import config
import logging

api_bp = Blueprint('api', __name__, url_prefix='/api')
api_bp.logger = logging.getLogger('web.routes.api')

_factcheck_api = None


def get_factcheck_api() -> FactCheckAPI:
    """Get the shared fact-check API, creating it on first use."""
    global _factcheck_api
    if _factcheck_api is None:
        _factcheck_api = create_factcheck_api(config=FactCheckConfig.from_env())
    return _factcheck_api


@api_bp.route('/analyze', methods=['POST'])
@rate_limit(**config.get_rate_limit('api_analyze'))
def analyze_text():
    """Run the full fact-check pipeline on the posted text."""
    data = request.get_json(silent=True)

    if not data or not isinstance(data, dict):
        return jsonify({'error': 'No JSON body provided'}), 400

    text = data.get('text')

    try:
        report = get_factcheck_api().analyze(text)
    except InvalidInputError as e:
        api_bp.logger.info(f"Rejected analysis request: {e.message}")
        return jsonify(e.to_dict()), 400

    api_bp.logger.info(f"Analyzed {len(text)} characters: {report.verdict.classification.value}")
    return jsonify(report.to_dict())


@api_bp.route('/health', methods=['GET'])
@rate_limit(**config.get_rate_limit('api_health'))
def health():
    """Report pipeline health by running the smoke-test text."""
    result = get_factcheck_api().health_check()
    status_code = 200 if result['status'] == 'healthy' else 503
    return jsonify(result), status_code
