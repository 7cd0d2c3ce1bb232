from playwright_review.cli import main

main()
