"""
Storage Module - Resume file storage with public URLs
"""

import os
from datetime import datetime
from flask import current_app, url_for
from werkzeug.utils import secure_filename

RESUME_DIR = 'resumes'


def allowed_resume(filename):
    """Check if file extension is allowed for a resume"""
    allowed = current_app.config.get('ALLOWED_RESUME_EXTENSIONS', {'pdf'})
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in allowed


def upload_folder():
    folder = current_app.config.get('UPLOAD_FOLDER', 'static/uploads')
    if not os.path.isabs(folder):
        folder = os.path.join(current_app.root_path, folder)
    return folder


def save_resume(file, language='en'):
    """
    Store an uploaded resume and return its public URL

    Args:
        file (FileStorage): Uploaded file
        language (str): Resume language, part of the stored name

    Returns:
        str: Public URL of the stored file
    """
    filename = secure_filename(file.filename)
    stored_name = f"resume_{language}_{datetime.now().strftime('%Y%m%d_%H%M%S')}_{filename}"
    target_dir = os.path.join(upload_folder(), RESUME_DIR)
    os.makedirs(target_dir, exist_ok=True)
    file.save(os.path.join(target_dir, stored_name))
    current_app.logger.info(f"Stored resume {stored_name}")
    return url_for('portfolio.uploaded_file', filename=f"{RESUME_DIR}/{stored_name}")


def remove_resume(public_url):
    """Delete the stored file behind a public URL; True if a file was removed"""
    if not public_url:
        return False

    marker = f"/uploads/{RESUME_DIR}/"
    if marker not in public_url:
        current_app.logger.warning(f"Not a stored resume URL: {public_url}")
        return False

    stored_name = secure_filename(public_url.rsplit('/', 1)[-1])
    path = os.path.join(upload_folder(), RESUME_DIR, stored_name)
    if not os.path.exists(path):
        return False
    os.remove(path)
    current_app.logger.info(f"Removed resume {stored_name}")
    return True
