from flask import Flask, render_template, request, jsonify, send_file
from pathlib import Path
import sys
import logging

sys.path.insert(0, str(Path(__file__).parent / 'src'))

from forms.salary_form import SalaryForm
from processors.estimate_report_generator import EstimateReportGenerator
from config.settings import SECRET_KEY, DEBUG, LOG_LEVEL, PORT, TEMPLATE_DIR

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = Flask(__name__, template_folder=str(TEMPLATE_DIR))
app.config['SECRET_KEY'] = SECRET_KEY
app.config['DEBUG'] = DEBUG
app.json.ensure_ascii = False


class InvalidFormRequest(ValueError):
    """Request body could not be turned into form fields"""


def get_raw_fields():
    """Read the posted raw field texts"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidFormRequest('Request body must be a JSON object')

    fields = data.get('fields', {})
    if not isinstance(fields, dict):
        raise InvalidFormRequest('"fields" must be an object of field path to text')

    return {path: (None if text is None else str(text)) for path, text in fields.items()}


def build_form_snapshot():
    """Fresh form session per request, updated with the posted fields"""
    form = SalaryForm()
    try:
        return form.update_fields(get_raw_fields())
    except KeyError as e:
        raise InvalidFormRequest(e.args[0]) from e


# ============================================================================
# Routes
# ============================================================================

@app.route('/')
def index():
    """Salary estimation form"""
    snapshot = SalaryForm().snapshot()
    return render_template('index.html', snapshot=snapshot, formatted=snapshot.formatted_result())

# ============================================================================
# API Endpoints
# ============================================================================

@app.route('/api/calculate', methods=['POST'])
def calculate():
    """Recompute the estimate from the current field texts"""
    try:
        snapshot = build_form_snapshot()
        return jsonify({'success': True, **snapshot.to_dict()})

    except InvalidFormRequest as e:
        logger.warning("Rejected calculation request: %s", e)
        return jsonify({
            'success': False,
            'message': str(e)
        }), 400

    except Exception as e:
        logger.exception("Calculation failed")
        return jsonify({
            'success': False,
            'message': str(e)
        }), 500

@app.route('/api/export', methods=['POST'])
def export_estimate():
    """Download the current estimate as an Excel workbook"""
    try:
        snapshot = build_form_snapshot()
        stream = EstimateReportGenerator().generate(snapshot.values, snapshot.result, snapshot.errors)
        return send_file(
            stream,
            as_attachment=True,
            download_name='salary_estimate.xlsx',
            mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
        )

    except InvalidFormRequest as e:
        logger.warning("Rejected export request: %s", e)
        return jsonify({
            'success': False,
            'message': str(e)
        }), 400

    except Exception as e:
        logger.exception("Export failed")
        return jsonify({
            'success': False,
            'message': str(e)
        }), 500

if __name__ == '__main__':
    logger.info("Starting Salary Estimator on port %s", PORT)
    app.run(host='0.0.0.0', port=PORT, debug=DEBUG)
