import PyInstaller.__main__

print("🚀 开始构建 xmlconf_demo.exe ...")

# 1. 配置参数
params = [
    'main.py',
    '--name=xmlconf_demo',
    '--onefile',
    '--noconsole',
    '--collect-all=customtkinter',          # 收集 ctk 主题资源
    '--hidden-import=PIL._tkinter_finder',
    # 界面模块在 main() 中延迟导入
    '--hidden-import=xmlconf.ui.main_window',
    '--hidden-import=xmlconf.ui.styles',
    '--clean',
    '--distpath=dist',
    '--workpath=build',
    '--specpath=.',
    '--noconfirm',
]

# 2. 执行构建
PyInstaller.__main__.run(params)

print("✅ 构建完成！文件位于 dist/xmlconf_demo.exe")
