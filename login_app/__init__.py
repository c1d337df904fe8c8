"""Login screen skeleton: service -> repository -> use case -> view model -> view."""
