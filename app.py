"""
PaperCite - Flask Application
Provides the citation API endpoints.

Endpoints:
- GET  /api/health        - Health check
- POST /api/cite          - Cite a DOI, ISBN, YouTube/Wikipedia link or URL
- POST /api/search        - Search books for a free-text query
- POST /api/cite/selected - Cite a search result the user picked
- GET  /api/styles        - Available citation styles
"""

import os
import traceback
from flask import Flask, request, jsonify

from models import SearchCandidate, CitationInputError, CitationGenerationError
from router import resolve, search_all_sources, resolve_selected

app = Flask(__name__)


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# =============================================================================
# API ROUTES
# =============================================================================

@app.route('/api/health', methods=['GET'])
def health():
    """Health check endpoint."""
    return jsonify({'status': 'ok'})


@app.route('/api/search', methods=['POST'])
def api_search():
    """
    Search endpoint for text queries - returns multiple results.

    Request JSON:
        { "query": "Pride and Prejudice" }

    Response JSON:
        { "results": [ {id, title, authors, year, publisher, type, source, raw}, ... ] }
    """
    try:
        query = str(_json_body().get('query') or '')
        results = search_all_sources(query)
        return jsonify({'results': [r.to_dict() for r in results]})

    except CitationInputError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        print(f"[API] Search error: {e}")
        traceback.print_exc()
        return jsonify({'error': 'Search failed'}), 500


@app.route('/api/cite/selected', methods=['POST'])
def api_cite_selected():
    """
    Cite from a search result.

    Request JSON:
        { "result": { ...one item of /api/search results... } }

    Response JSON:
        { "citations": {apa7, mla9, chicago, harvard} }
    """
    try:
        result = _json_body().get('result')
        if not isinstance(result, dict):
            return jsonify({'error': 'No result provided'}), 400

        try:
            candidate = SearchCandidate.from_dict(result)
        except ValueError:
            return jsonify({'error': 'Unknown result source'}), 400

        return jsonify(resolve_selected(candidate).to_dict())

    except CitationInputError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        print(f"[API] Cite selected error: {e}")
        traceback.print_exc()
        return jsonify({'error': 'Failed to generate citation'}), 500


@app.route('/api/cite', methods=['POST'])
def api_cite():
    """
    Direct cite endpoint (URLs, DOIs, ISBNs).

    Request JSON:
        { "source": "10.1038/nature12373" }

    Response JSON:
        { "citations": {apa7, mla9, chicago, harvard} }
        or, for free text:
        { "needsSearch": true, "message": "..." }
    """
    try:
        source = str(_json_body().get('source') or '')
        return jsonify(resolve(source).to_dict())

    except CitationInputError as e:
        return jsonify({'error': str(e)}), 400
    except CitationGenerationError as e:
        return jsonify({'error': str(e)}), 500
    except Exception as e:
        print(f"[API] Citation error: {e}")
        traceback.print_exc()
        return jsonify({'error': 'Failed to generate citation'}), 500


@app.route('/api/styles', methods=['GET'])
def api_styles():
    """Return available citation styles."""
    return jsonify({
        'styles': ['apa7', 'mla9', 'chicago', 'harvard']
    })


# =============================================================================
# MAIN
# =============================================================================

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('DEBUG', 'false').lower() == 'true'
    app.run(host='0.0.0.0', port=port, debug=debug)
