from markdown_blog import create_app

app = create_app()
