"""Products: model and builder, validation rules, JSON request and response shapes, and storage."""