"""
Agentic Launchpad ROI Calculator: Flask API Server
Form values in, savings breakdown out. The estimator is pure; this layer
owns input coercion, the assumptions snapshot and response shaping.
"""
import os
import logging
import traceback
from flask import Flask, jsonify, request, send_file
from engines.assumptions import load_config, config_to_dict
from engines.inputs import parse_inputs, InvalidInputError
from engines.roi import estimate
from engines.contact import build_contact_link, headline_figures
from engines.export import export_buffer

app = Flask(__name__)

# Current assumptions snapshot. Reload swaps the reference; snapshots are never mutated.
STATE = {'config': load_config()}


def _request_inputs():
    """Accepts {inputs: {...}, advanced: bool} or a flat form mapping."""
    body = request.get_json(silent=True)
    if body is None:
        body = request.form.to_dict()
    form = body.get('inputs', body) if isinstance(body, dict) else {}
    form = form if isinstance(form, dict) else {}
    advanced = body.get('advanced', True) if isinstance(body, dict) else True
    if isinstance(advanced, str):
        advanced = advanced.strip().lower() in ('1', 'true', 'yes', 'on')
    return parse_inputs(form, advanced=bool(advanced))


def _calculate():
    config = STATE['config']
    inputs = _request_inputs()
    return inputs, estimate(inputs, config), config


@app.errorhandler(InvalidInputError)
def _invalid_input(e):
    return jsonify({'status': 'error', 'message': str(e)}), 400


@app.route('/api/config')
def api_config():
    return jsonify(config_to_dict(STATE['config']))


@app.route('/api/industries')
def api_industries():
    industries = config_to_dict(STATE['config']['industryDefaults'])
    return jsonify({'industries': industries, 'keys': sorted(industries)})


@app.route('/api/calculate', methods=['POST'])
def api_calculate():
    try:
        inputs, results, _ = _calculate()
        return jsonify({'status': 'ok', 'inputs': inputs, 'results': results,
                        'headline': headline_figures(results)})
    except InvalidInputError:
        raise
    except Exception as e:
        traceback.print_exc()
        return jsonify({'status': 'error', 'message': str(e)}), 500


@app.route('/api/contact', methods=['POST'])
def api_contact():
    try:
        _, results, _ = _calculate()
        return jsonify({'status': 'ok', 'mailto': build_contact_link(results)})
    except InvalidInputError:
        raise
    except Exception as e:
        traceback.print_exc()
        return jsonify({'status': 'error', 'message': str(e)}), 500


@app.route('/api/export', methods=['POST'])
def api_export():
    """Export one calculation (results, inputs, assumptions) to Excel."""
    try:
        inputs, results, config = _calculate()
        return send_file(export_buffer(results, config, inputs), as_attachment=True,
                         download_name='Agentic_Launchpad_ROI.xlsx',
                         mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet')
    except InvalidInputError:
        raise
    except Exception as e:
        traceback.print_exc()
        return jsonify({'status': 'error', 'message': str(e)}), 500


@app.route('/api/reload', methods=['POST'])
def api_reload():
    """Re-read assumptions.xlsx into a fresh snapshot."""
    try:
        STATE['config'] = load_config()
        logging.info("assumptions reloaded")
        return jsonify({'status': 'ok', 'config': config_to_dict(STATE['config'])})
    except Exception as e:
        traceback.print_exc()
        return jsonify({'status': 'error', 'message': str(e)}), 500


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(message)s')
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=os.environ.get('FLASK_DEBUG') == '1')
