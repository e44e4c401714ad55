"""Package lists and config-file patterns for the package dependency analyzer."""

from __future__ import annotations

# Config files that may reference packages without a component importing them.
# Brace groups are expanded by the analyzer before globbing.
CONFIG_FILES: tuple[str, ...] = (
    # Build tools
    "webpack.config.{js,ts}", "vite.config.{js,ts}", "rollup.config.{js,ts}",
    "esbuild.config.{js,ts}", "parcel.config.{js,json}", "snowpack.config.{js,json}",
    "module.config.{js,ts}",
    # Next.js
    "next.config.{js,mjs,ts}",
    # CSS tooling
    "tailwind.config.{js,ts}", "postcss.config.{js,mjs,ts}", "stylelint.config.{js,json,ts}",
    # Babel
    "babel.config.{js,ts,json}", ".babelrc.{js,json}", ".babelrc",
    # Testing
    "jest.config.{js,ts}", "vitest.config.{js,ts}", "playwright.config.{js,ts}",
    "cypress.config.{js,ts}", "karma.conf.{js,ts}", "protractor.conf.{js,ts}",
    # Linting and formatting
    ".eslintrc.{js,json,cjs}", ".eslintrc", "eslint.config.{js,mjs,ts}",
    "prettier.config.{js,ts}", ".prettierrc.{js,json}", ".prettierrc",
    # TypeScript
    "tsconfig.json", "tsconfig.*.json", "jsconfig.json",
    # Storybook
    ".storybook/*.{js,ts}", "storybook.config.{js,ts}",
    # Other frameworks
    "astro.config.{js,ts}", "svelte.config.{js,ts}", "nuxt.config.{js,ts}",
    "remix.config.{js,ts}", "vue.config.{js,ts}", "quasar.config.{js,ts}",
    "capacitor.config.{js,ts,json}", "ionic.config.json", "metro.config.{js,ts}",
    "expo.json", "app.json", "angular.json", ".angular-cli.json",
    "workbox-config.{js,ts}", "serverless.{yml,yaml}",
    # Workspaces and runtime
    "pnpm-workspace.yaml", "lerna.json", "turbo.json", "nx.json", "workspace.json",
    "nodemon.json", "pm2.config.{js,ts}", "docusaurus.config.{js,ts}", "components.json",
)

# Packages that are used through config, CSS or tooling rather than imports
SPECIAL_PACKAGES: frozenset[str] = frozenset({
    "@shadcn/ui", "tailwindcss-animate", "@tailwindcss/typography", "@tailwindcss/forms",
    "@tailwindcss/aspect-ratio", "@tailwindcss/container-queries", "tailwindcss-gradients",
    "daisyui", "autoprefixer", "normalize.css", "reset-css", "@fontsource/inter",
    "@next/font", "postcss-preset-env", "postcss-nested", "postcss-import",
    "postcss-flexbugs-fixes", "@babel/preset-env", "@babel/preset-react",
    "@babel/preset-typescript", "@babel/runtime", "eslint-config-next",
    "eslint-config-prettier", "eslint-config-airbnb", "eslint-config-turbo",
    "babel-loader", "style-loader", "css-loader", "file-loader", "url-loader",
    "@types/node", "@types/webpack-env", "core-js", "regenerator-runtime", "tslib",
    "browserslist", "@next/bundle-analyzer", "@next/mdx", "next-sitemap", "next-pwa",
    "@vitejs/plugin-react", "@vitejs/plugin-vue", "vite-tsconfig-paths",
    "@testing-library/react", "react-refresh", "@nuxtjs/robots", "@nuxtjs/sitemap",
    "@sveltejs/adapter-auto", "prisma", "@prisma/client", "@graphql-codegen/cli",
    "@graphql-codegen/typescript", "module-alias", "tsconfig-paths", "dotenv-expand",
    "cross-env", "terser", "cssnano", "@storybook/addon-essentials",
    "@storybook/addon-links", "@storybook/addon-docs", "jsdom", "identity-obj-proxy",
    "@changesets/cli", "turborepo", "workbox-webpack-plugin", "workbox-window",
    "helmet", "cors", "sharp", "svgr",
})

DEV_TOOL_PACKAGES: frozenset[str] = frozenset({
    "vite", "webpack", "rollup", "esbuild", "turbopack", "parcel",
    "@vitejs/plugin-react-swc", "typescript", "babel", "@babel/core", "swc", "@swc/core",
    "tsup", "jest", "vitest", "@testing-library/vue", "@testing-library/jest-dom",
    "@testing-library/user-event", "cypress", "@cypress/vite-dev-server", "playwright",
    "@playwright/test", "eslint", "prettier", "@typescript-eslint/parser",
    "@typescript-eslint/eslint-plugin", "eslint-plugin-react", "eslint-plugin-react-hooks",
    "eslint-plugin-jsx-a11y", "eslint-plugin-import", "stylelint",
    "stylelint-config-standard", "@types/react", "@types/react-dom", "@types/jest",
    "@types/express", "postcss", "tailwindcss", "sass", "less", "stylus", "nodemon",
    "concurrently", "live-server", "http-server", "storybook", "@storybook/react",
    "@storybook/builder-vite", "typedoc", "docsify", "docusaurus", "turbo", "nx", "lerna",
    "compression-webpack-plugin", "plop", "hygen", "yeoman-generator", "husky",
    "lint-staged", "commitlint", "@commitlint/cli", "@commitlint/config-conventional",
    "@microsoft/rush", "npm-check-updates", "depcheck", "dotenv-cli",
    "webpack-bundle-analyzer", "vite-bundle-visualizer", "source-map-explorer",
    "semantic-release", "standard-version", "release-it", "imagemin", "svgo",
    "storybook-addon-designs", "msw", "json-server", "gh-pages", "firebase-tools",
    "vercel", "netlify-cli", "debug", "why-did-you-render", "react-devtools", "snyk",
    "npm-audit-fix", "i18next-parser", "swagger-jsdoc", "swagger-ui-express",
    "lighthouse", "web-vitals",
})

# Node built-ins never appear in package.json
NODE_BUILTINS: frozenset[str] = frozenset({
    "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
    "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain", "events",
    "fs", "http", "http2", "https", "inspector", "module", "net", "os", "path",
    "perf_hooks", "process", "punycode", "querystring", "readline", "repl", "stream",
    "string_decoder", "timers", "tls", "trace_events", "tty", "url", "util", "v8",
    "vm", "wasi", "worker_threads", "zlib",
})


def is_special_package(name: str) -> bool:
    return name in SPECIAL_PACKAGES


def is_dev_tool_package(name: str) -> bool:
    return name in DEV_TOOL_PACKAGES


def is_node_builtin(name: str) -> bool:
    return name.startswith("node:") or name in NODE_BUILTINS
