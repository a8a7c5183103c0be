"""
I18n Module - Static UI strings and current-language selection
"""

from flask import request, session, current_app

LANGUAGE_COOKIE = 'portfolio-language'

UI_STRINGS = {
    'en': {
        'nav': {
            'about': 'About',
            'projects': 'Projects',
            'experience': 'Experience',
            'skills': 'Skills',
            'hobbies': 'Hobbies',
            'education': 'Education',
            'contact': 'Contact',
            'resume': 'Resume',
            'testimonials': 'Testimonials',
            'dashboard': 'Dashboard',
            'login': 'Login',
            'logout': 'Logout',
        },
        'hero': {
            'greeting': "Hi, I'm",
            'viewWork': 'View My Work',
            'contactMe': 'Contact Me',
        },
        'sections': {
            'aboutMe': 'About Me',
            'projects': 'Projects',
            'experience': 'Experience',
            'skills': 'Skills',
            'hobbies': 'Hobbies',
            'education': 'Education',
            'contact': 'Contact',
            'resume': 'Resume',
        },
        'contact': {
            'getInTouch': 'Get In Touch',
            'sendMessage': 'Send me a message',
            'name': 'Name',
            'email': 'Email',
            'subject': 'Subject',
            'message': 'Message',
            'send': 'Send Message',
            'sending': 'Sending...',
            'sent': 'Message sent successfully!',
            'phone': 'Phone',
            'location': 'Location',
        },
        'resume': {
            'title': 'My Resume',
            'noResume': 'No resume uploaded yet. Check back later!',
            'downloadPdf': 'Download PDF',
        },
        'common': {
            'loading': 'Loading...',
            'save': 'Save Changes',
            'saving': 'Saving...',
            'add': 'Add',
            'edit': 'Edit',
            'delete': 'Delete',
            'cancel': 'Cancel',
            'viewProject': 'View Project',
            'viewGithub': 'View GitHub',
            'present': 'Present',
        },
        'dashboard': {
            'title': 'Dashboard',
            'editAboutMe': 'Edit About Me',
            'editContact': 'Edit Contact Information',
            'manageProjects': 'Manage Projects',
            'manageExperience': 'Manage Experience',
            'manageSkills': 'Manage Skills',
            'manageHobbies': 'Manage Hobbies',
            'manageEducation': 'Manage Education',
            'manageTestimonials': 'Manage Testimonials',
            'messages': 'Messages',
            'editResume': 'Edit Resume',
            'uploadResume': 'Upload Resume (PDF or Image)',
            'removeResume': 'Remove Resume',
            'resumeHelp': 'Upload a PDF or image of your resume',
            'currentResume': 'Current Resume',
        },
        'auth': {
            'title': 'Welcome',
            'description': 'Sign in or create an account',
            'login': 'Login',
            'signup': 'Sign Up',
            'username': 'Username',
            'password': 'Password',
            'loginFailed': 'Login failed',
            'signupFailed': 'Sign up failed',
            'welcomeBack': 'Welcome back!',
            'loginSuccess': 'You have successfully logged in.',
            'accountCreated': 'Account created!',
            'signupSuccess': 'Your account has been created.',
            'usernameMinLength': 'Username must be at least 3 characters',
            'passwordMinLength': 'Password must be at least 6 characters',
        },
        'testimonials': {
            'title': 'Testimonials',
            'subtitle': 'What people say about working with me',
            'writeTestimonial': 'Write a Testimonial',
            'writeDesc': 'Share your experience. It will appear once approved.',
            'placeholder': 'Write your testimonial here...',
            'submit': 'Submit Testimonial',
            'submitted': 'Testimonial submitted!',
            'submittedDesc': 'Your testimonial is pending approval.',
            'loginToSubmit': 'Log in to write a testimonial',
            'yourTestimonials': 'Your Testimonials',
            'publicTestimonials': 'Testimonials',
            'noTestimonials': 'No testimonials yet.',
        },
    },
    'fr': {
        'nav': {
            'about': 'À propos',
            'projects': 'Projets',
            'experience': 'Expérience',
            'skills': 'Compétences',
            'hobbies': 'Loisirs',
            'education': 'Formation',
            'contact': 'Contact',
            'resume': 'CV',
            'testimonials': 'Témoignages',
            'dashboard': 'Tableau de bord',
            'login': 'Connexion',
            'logout': 'Déconnexion',
        },
        'hero': {
            'greeting': 'Bonjour, je suis',
            'viewWork': 'Voir mes travaux',
            'contactMe': 'Me contacter',
        },
        'sections': {
            'aboutMe': 'À propos de moi',
            'projects': 'Projets',
            'experience': 'Expérience',
            'skills': 'Compétences',
            'hobbies': 'Loisirs',
            'education': 'Formation',
            'contact': 'Contact',
            'resume': 'CV',
        },
        'contact': {
            'getInTouch': 'Me contacter',
            'sendMessage': 'Envoyez-moi un message',
            'name': 'Nom',
            'email': 'Email',
            'subject': 'Sujet',
            'message': 'Message',
            'send': 'Envoyer',
            'sending': 'Envoi en cours...',
            'sent': 'Message envoyé avec succès!',
            'phone': 'Téléphone',
            'location': 'Localisation',
        },
        'resume': {
            'title': 'Mon CV',
            'noResume': 'Aucun CV téléchargé pour le moment. Revenez plus tard!',
            'downloadPdf': 'Télécharger le PDF',
        },
        'common': {
            'loading': 'Chargement...',
            'save': 'Enregistrer',
            'saving': 'Enregistrement...',
            'add': 'Ajouter',
            'edit': 'Modifier',
            'delete': 'Supprimer',
            'cancel': 'Annuler',
            'viewProject': 'Voir le projet',
            'viewGithub': 'Voir GitHub',
            'present': 'Présent',
        },
        'dashboard': {
            'title': 'Tableau de bord',
            'editAboutMe': 'Modifier À propos de moi',
            'editContact': 'Modifier les informations de contact',
            'manageProjects': 'Gérer les projets',
            'manageExperience': "Gérer l'expérience",
            'manageSkills': 'Gérer les compétences',
            'manageHobbies': 'Gérer les loisirs',
            'manageEducation': 'Gérer la formation',
            'manageTestimonials': 'Gérer les témoignages',
            'messages': 'Messages',
            'editResume': 'Modifier le CV',
            'uploadResume': 'Télécharger le CV (PDF ou Image)',
            'removeResume': 'Supprimer le CV',
            'resumeHelp': 'Téléchargez un PDF ou une image de votre CV',
            'currentResume': 'CV actuel',
        },
        'auth': {
            'title': 'Bienvenue',
            'description': 'Connectez-vous ou créez un compte',
            'login': 'Connexion',
            'signup': 'Inscription',
            'username': "Nom d'utilisateur",
            'password': 'Mot de passe',
            'loginFailed': 'Échec de la connexion',
            'signupFailed': "Échec de l'inscription",
            'welcomeBack': 'Bon retour!',
            'loginSuccess': 'Vous êtes connecté.',
            'accountCreated': 'Compte créé!',
            'signupSuccess': 'Votre compte a été créé.',
            'usernameMinLength': "Le nom d'utilisateur doit contenir au moins 3 caractères",
            'passwordMinLength': 'Le mot de passe doit contenir au moins 6 caractères',
        },
        'testimonials': {
            'title': 'Témoignages',
            'subtitle': 'Ce que les gens disent de leur collaboration avec moi',
            'writeTestimonial': 'Écrire un témoignage',
            'writeDesc': 'Partagez votre expérience. Il apparaîtra une fois approuvé.',
            'placeholder': 'Écrivez votre témoignage ici...',
            'submit': 'Soumettre',
            'submitted': 'Témoignage soumis!',
            'submittedDesc': "Votre témoignage est en attente d'approbation.",
            'loginToSubmit': 'Connectez-vous pour écrire un témoignage',
            'yourTestimonials': 'Vos témoignages',
            'publicTestimonials': 'Témoignages',
            'noTestimonials': 'Aucun témoignage pour le moment.',
        },
    },
}


def default_language():
    return current_app.config.get('SOURCE_LANGUAGE', 'en')


def is_supported(language):
    return language in current_app.config.get('SUPPORTED_LANGUAGES', ('en', 'fr'))


def get_language():
    """Current language: ?lang= argument, then session, then cookie"""
    candidates = (
        request.args.get('lang'),
        session.get('language'),
        request.cookies.get(LANGUAGE_COOKIE),
    )
    for candidate in candidates:
        if candidate and is_supported(candidate.lower()):
            return candidate.lower()
    return default_language()


def get_ui_strings(language=None):
    language = language or get_language()
    return UI_STRINGS.get(language, UI_STRINGS['en'])
