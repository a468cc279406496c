# Showroom API - development entry point
# FLASK_CONFIG selects the configuration (development, production, testing)

import os

from showroom import create_app
from showroom.extensions import db

app = create_app()

# ==================== MAIN ====================

if __name__ == '__main__':
    with app.app_context():
        db.create_all()

    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
