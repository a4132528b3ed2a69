def register_blueprints(app):
    from weather_diary.routes.health import health_bp
    from weather_diary.routes.diary import diary_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(diary_bp)
