from flask import Blueprint, current_app, jsonify, send_from_directory
from .models import Image

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to Coast or Coast!'})

@main.route('/images.json')
def image_manifest():
    images = Image.query.order_by(Image.id).all()
    return jsonify({
        'images': [img.to_manifest_entry() for img in images],
        'has_images': bool(images),
    })

@main.route('/images/<path:filename>')
def image_file(filename):
    return send_from_directory(current_app.config['IMAGES_DIR'], filename)
